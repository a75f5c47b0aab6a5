"""The SEI Mate demo plugin: three actions plus two text-model stubs."""
from enum import Enum
from typing import Callable, Dict, List, Optional

from skills.registry import Action, SkillRegistry, registry as default_registry

PLUGIN_NAME = "simple-demo"
PLUGIN_DESCRIPTION = "Simple demo plugin for SEI transfers and balance checking"

TEXT_SMALL_REPLY = (
    'SEI Mate: I can help you transfer SEI tokens and check balances. '
    'Try "transfer 10 SEI to sei1abc123" or "check balance".'
)

TEXT_LARGE_REPLY = """Hello! I'm SEI Mate, your SEI blockchain assistant. I can help you:
• Transfer SEI tokens: "transfer 10 SEI to sei1abc123"
• Check wallet balance: "check balance"
• Confirm transactions: "yes" or "confirm"

What would you like to do?"""


class ModelType(str, Enum):
    TEXT_SMALL = "TEXT_SMALL"
    TEXT_LARGE = "TEXT_LARGE"


def text_small(prompt: str = "") -> str:
    return TEXT_SMALL_REPLY


def text_large(prompt: str = "") -> str:
    return TEXT_LARGE_REPLY


class Plugin:
    """A named bundle of actions and model handlers."""
    def __init__(
        self,
        name: str,
        description: str,
        registry: SkillRegistry,
        models: Optional[Dict[ModelType, Callable[[str], str]]] = None,
    ):
        self.name = name
        self.description = description
        self.registry = registry
        self.models = models or {}

    @property
    def actions(self) -> List[Action]:
        return self.registry.actions()

    def generate_text(self, model_type: ModelType, prompt: str = "") -> str:
        model = self.models.get(model_type)
        if model is None:
            raise KeyError(f"Plugin '{self.name}' has no {model_type.value} model")
        return model(prompt)


def build_demo_plugin(registry: Optional[SkillRegistry] = None) -> Plugin:
    return Plugin(
        name=PLUGIN_NAME,
        description=PLUGIN_DESCRIPTION,
        registry=registry or default_registry,
        models={
            ModelType.TEXT_SMALL: text_small,
            ModelType.TEXT_LARGE: text_large,
        },
    )
