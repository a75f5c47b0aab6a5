"""Wires the SEI Mate character and demo plugin into a loadable project."""
from typing import Awaitable, Callable, List, Optional

from characters import Character, build_character
from config import PluginOptions
from core.plugin import Plugin, build_demo_plugin
from logger_config import get_logger
from skills.registry import SkillRegistry

logger = get_logger(__name__)


class ProjectAgent:
    def __init__(
        self,
        character: Character,
        plugins: List[Plugin],
        init: Optional[Callable[["ProjectAgent"], Awaitable[None]]] = None,
    ):
        self.character = character
        self.plugins = plugins
        self._init = init

    async def init(self) -> None:
        """Runs the agent's startup hook, if any."""
        if self._init is not None:
            await self._init(self)


class Project:
    def __init__(self, agents: List[ProjectAgent]):
        self.agents = agents


async def init_character(agent: ProjectAgent) -> None:
    logger.info("Initializing Simple SEI Mate Demo")
    logger.info(f"Character Name: {agent.character.name}")


def build_project(options: PluginOptions, registry: Optional[SkillRegistry] = None) -> Project:
    """Builds the demo project.

    Args:
        options: Which model plugins the character should list. Computed once
            by the caller, typically from `cfg().plugin_options()`.
        registry: Action registry backing the demo plugin (default: the
            shared registry of shipped skills).
    """
    agent = ProjectAgent(
        character=build_character(options),
        plugins=[build_demo_plugin(registry)],
        init=init_character,
    )
    return Project(agents=[agent])
