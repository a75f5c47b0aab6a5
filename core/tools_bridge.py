"""Bridge SEI Mate actions to LangChain tools.

Wraps each action in the SkillRegistry as a LangChain StructuredTool so a
tool-calling model can trigger it with the user's message.

This is the integration point for external tool-calling hosts (for example a
LangGraph agent bound with `llm.bind_tools(get_all_tools())`). SEI Mate's own
agent and server dispatch through the registry directly and do not call it.
"""
from typing import List, Optional

from langchain_core.tools import BaseTool, StructuredTool

from skills.registry import Action, SkillRegistry, registry as default_registry
from logger_config import get_logger

logger = get_logger(__name__)


def _make_tool(registry: SkillRegistry, action: Action) -> BaseTool:
    def run(message: str) -> str:
        """Run the action on a chat message.

        Args:
            message: The user's message, e.g. "transfer 10 SEI to sei1abc123".
        """
        return registry.execute_skill(action.name, message).text

    similes = f" (also: {', '.join(action.similes)})" if action.similes else ""
    return StructuredTool.from_function(
        func=run,
        name=action.name.lower(),
        description=f"{action.description}{similes}",
    )


def get_all_tools(registry: Optional[SkillRegistry] = None) -> List[BaseTool]:
    """Get a tool for every registered action, in dispatch order.

    Args:
        registry: The action registry to wrap (default: the shared registry).

    Returns:
        List of LangChain tool instances.
    """
    registry = registry or default_registry
    tools = [_make_tool(registry, action) for action in registry.actions()]
    logger.info(f"Loaded {len(tools)} tools: {[t.name for t in tools]}")
    return tools
