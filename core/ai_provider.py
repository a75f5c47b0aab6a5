"""Text generation across OpenAI, Anthropic and OpenRouter.

Providers are tried in a fixed preference order (OpenAI, then Anthropic,
then OpenRouter). A failing provider is logged and the next configured one
is tried. The request and header shapes defined here are also what
`verify_providers.py` reports on.
"""
from typing import Any, Dict, List, Optional

import requests
from pydantic import BaseModel, Field

from logger_config import get_logger

logger = get_logger(__name__)

OPENAI = "openai"
ANTHROPIC = "anthropic"
OPENROUTER = "openrouter"

PROVIDER_ORDER = [OPENAI, ANTHROPIC, OPENROUTER]

ENDPOINTS = {
    OPENAI: "https://api.openai.com/v1/chat/completions",
    ANTHROPIC: "https://api.anthropic.com/v1/messages",
    OPENROUTER: "https://openrouter.ai/api/v1/chat/completions",
}

DEFAULT_MODELS = {
    OPENAI: "gpt-4",
    ANTHROPIC: "claude-3-sonnet-20240229",
    OPENROUTER: "anthropic/claude-3.5-sonnet",
}

ANTHROPIC_VERSION = "2023-06-01"
OPENROUTER_REFERER = "https://sei-mate.ai"
OPENROUTER_TITLE = "SEI Mate AI Agent"
REQUEST_TIMEOUT = 30


class AIProviderError(Exception):
    """Base error for provider calls."""


class InvalidProviderResponse(AIProviderError):
    """The provider answered, but without any generated text."""


class NoProviderAvailableError(AIProviderError):
    """No provider is configured, or every configured provider failed."""


class AIProviderConfig(BaseModel):
    openai_api_key: Optional[str] = None
    anthropic_api_key: Optional[str] = None
    openrouter_api_key: Optional[str] = None
    default_models: Dict[str, str] = Field(default_factory=dict)


def build_headers(provider: str, api_key: str) -> Dict[str, str]:
    if provider == ANTHROPIC:
        return {
            "x-api-key": api_key,
            "Content-Type": "application/json",
            "anthropic-version": ANTHROPIC_VERSION,
        }
    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }
    if provider == OPENROUTER:
        headers["HTTP-Referer"] = OPENROUTER_REFERER
        headers["X-Title"] = OPENROUTER_TITLE
    return headers


def build_request(
    provider: str,
    prompt: str,
    model: Optional[str] = None,
    max_tokens: int = 1000,
    temperature: float = 0.1,
) -> Dict[str, Any]:
    return {
        "model": model or DEFAULT_MODELS[provider],
        "messages": [{"role": "user", "content": prompt}],
        "temperature": temperature,
        "max_tokens": max_tokens,
    }


class AIProvider:
    """Generates text with whichever configured provider answers first."""

    def __init__(self, config: AIProviderConfig):
        self.config = config

    def _api_key(self, provider: str) -> Optional[str]:
        return {
            OPENAI: self.config.openai_api_key,
            ANTHROPIC: self.config.anthropic_api_key,
            OPENROUTER: self.config.openrouter_api_key,
        }.get(provider)

    def is_provider_available(self, provider: str) -> bool:
        return bool(self._api_key(provider))

    def get_available_provider(self) -> Optional[str]:
        """Returns the highest-priority configured provider, or None."""
        for provider in PROVIDER_ORDER:
            if self.is_provider_available(provider):
                return provider
        return None

    def get_provider_status(self) -> Dict[str, Any]:
        available = [p for p in PROVIDER_ORDER if self.is_provider_available(p)]
        return {
            "available": available,
            "primary": self.get_available_provider(),
            "total": len(available),
        }

    def generate_text(
        self,
        prompt: str,
        max_tokens: int = 1000,
        temperature: float = 0.1,
        preferred_provider: Optional[str] = None,
    ) -> str:
        """
        Generates text for `prompt`.

        Args:
            prompt: The user prompt.
            max_tokens: Completion token limit.
            temperature: Sampling temperature.
            preferred_provider: Provider to try before the usual order.

        Returns:
            The generated text.

        Raises:
            NoProviderAvailableError: If no provider is configured or all failed.
        """
        tried: List[str] = []

        if preferred_provider and self.is_provider_available(preferred_provider):
            tried.append(preferred_provider)
            try:
                return self._call_provider(preferred_provider, prompt, max_tokens, temperature)
            except (requests.RequestException, AIProviderError) as e:
                logger.warning(f"Preferred provider {preferred_provider} failed, trying fallback: {e}")

        for provider in PROVIDER_ORDER:
            if provider in tried or not self.is_provider_available(provider):
                continue
            try:
                return self._call_provider(provider, prompt, max_tokens, temperature)
            except (requests.RequestException, AIProviderError) as e:
                logger.warning(f"AI provider {provider} failed: {e}")

        raise NoProviderAvailableError("No AI providers available or all providers failed")

    def _call_provider(self, provider: str, prompt: str, max_tokens: int, temperature: float) -> str:
        if provider not in ENDPOINTS:
            raise AIProviderError(f"Unknown provider: {provider}")

        model = self.config.default_models.get(provider)
        response = requests.post(
            ENDPOINTS[provider],
            json=build_request(provider, prompt, model, max_tokens, temperature),
            headers=build_headers(provider, self._api_key(provider)),
            timeout=REQUEST_TIMEOUT,
        )
        response.raise_for_status()
        return self._extract_text(provider, response.json())

    def _extract_text(self, provider: str, data: Dict[str, Any]) -> str:
        try:
            if provider == ANTHROPIC:
                text = data["content"][0]["text"]
            else:
                text = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            text = None

        if not text:
            raise InvalidProviderResponse(f"Invalid response from {provider} API")
        return text
