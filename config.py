import os
from functools import lru_cache
from typing import Optional, Mapping
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

# Load .env file if it exists
load_dotenv()

MOCK_OPENAI_KEY = "mock-openai-key"
MOCK_ANTHROPIC_KEY = "mock-anthropic-key"
MOCK_OPENROUTER_KEY = "mock-openrouter-key"


def _is_set(value: Optional[str]) -> bool:
    return bool(value and value.strip())


class PluginOptions(BaseModel):
    """Model-provider plugins to enable on the character."""
    model_config = ConfigDict(frozen=True)

    enable_openai: bool = False
    enable_openrouter: bool = False
    enable_ollama: bool = False


class ProviderKeys(BaseModel):
    """API keys used by the provider verification report."""
    model_config = ConfigDict(frozen=True)

    openai: str = MOCK_OPENAI_KEY
    anthropic: str = MOCK_ANTHROPIC_KEY
    openrouter: str = MOCK_OPENROUTER_KEY

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ProviderKeys":
        """Reads the keys from `environ`, substituting mock placeholders for unset ones."""
        environ = os.environ if environ is None else environ
        return cls(
            openai=environ.get("OPENAI_API_KEY") or MOCK_OPENAI_KEY,
            anthropic=environ.get("ANTHROPIC_API_KEY") or MOCK_ANTHROPIC_KEY,
            openrouter=environ.get("OPENROUTER_API_KEY") or MOCK_OPENROUTER_KEY,
        )


class Config:
    """Centralized configuration for SEI Mate."""

    def __init__(self):
        # API Keys
        self.openai_api_key: Optional[str] = os.getenv("OPENAI_API_KEY")
        self.anthropic_api_key: Optional[str] = os.getenv("ANTHROPIC_API_KEY")
        self.openrouter_api_key: Optional[str] = os.getenv("OPENROUTER_API_KEY")
        self.ollama_api_endpoint: Optional[str] = os.getenv("OLLAMA_API_ENDPOINT")

        # Logging
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

        # Server Settings
        self.host: str = os.getenv("HOST", "0.0.0.0")
        self.port: int = int(os.getenv("PORT", "8000"))

    def plugin_options(self) -> PluginOptions:
        """Derives which model plugins the character should load."""
        return PluginOptions(
            enable_openai=_is_set(self.openai_api_key),
            enable_openrouter=_is_set(self.openrouter_api_key),
            enable_ollama=_is_set(self.ollama_api_endpoint),
        )

@lru_cache()
def cfg() -> Config:
    """Returns a cached instance of the configuration."""
    return Config()
