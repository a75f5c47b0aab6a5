from typing import List, Dict, Optional, Tuple

from characters import Character
from core.plugin import ModelType, Plugin
from core.result import ActionResponse, ActionResult, Err, Ok
from logger_config import get_logger

logger = get_logger(__name__)

MODEL_ACTION = "MODEL"

class Agent:
    """
    Routes chat messages to the plugin actions of a character.

    Plugins are tried in the order given, and within a plugin actions are
    tried in registry priority order. The first action whose predicate
    accepts the message handles it. When nothing matches, the reply comes
    from the TEXT_LARGE model of the first plugin that has one.
    """
    def __init__(self, character: Character, plugins: List[Plugin]):
        self.name = character.name
        self.character = character
        self.plugins = plugins

    def respond(self, user_text: str) -> ActionResult:
        """Produces the result for a single message. Holds no state between calls."""
        for plugin in self.plugins:
            action = plugin.registry.match(user_text)
            if action is not None:
                logger.info(f"{self.name} (Action): {action.name}")
                return plugin.registry.execute_skill(action.name, user_text)

        return self._model_fallback(user_text)

    async def chat(
        self,
        user_text: str,
        history: Optional[List[Dict[str, str]]] = None
    ) -> Tuple[ActionResult, List[Dict[str, str]]]:
        """
        Processes a user message and returns the result and the updated
        transcript.

        Args:
            user_text: The message from the chat surface.
            history: The caller's transcript. It is appended to, never read
                by the actions.

        Returns:
            (result, updated_history)
        """
        history = list(history or [])
        history.append({"role": "user", "content": user_text})

        result = self.respond(user_text)
        logger.info(f"{self.name}: [{result.status}] {result.action}")

        history.append({"role": "assistant", "content": result.text})
        return result, history

    def _model_fallback(self, user_text: str) -> ActionResult:
        for plugin in self.plugins:
            if ModelType.TEXT_LARGE in plugin.models:
                text = plugin.generate_text(ModelType.TEXT_LARGE, user_text)
                return Ok(action=MODEL_ACTION, response=ActionResponse(text=text))

        return Err(action="NONE", kind="no_match", message="No action matched the message.")

    @classmethod
    def from_project_agent(cls, project_agent) -> "Agent":
        return cls(project_agent.character, project_agent.plugins)
