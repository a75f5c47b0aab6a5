import pytest
from pydantic import ValidationError

from config import (
    Config,
    MOCK_ANTHROPIC_KEY,
    MOCK_OPENAI_KEY,
    MOCK_OPENROUTER_KEY,
    PluginOptions,
    ProviderKeys,
    cfg,
)

@pytest.fixture
def clean_env(monkeypatch):
    for var in ["OPENAI_API_KEY", "ANTHROPIC_API_KEY", "OPENROUTER_API_KEY",
                "OLLAMA_API_ENDPOINT", "PORT", "LOG_LEVEL"]:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch

def test_config_defaults(clean_env):
    config = Config()
    assert config.openai_api_key is None
    assert config.port == 8000
    assert config.log_level == "INFO"

def test_config_reads_environment(clean_env):
    clean_env.setenv("PORT", "9001")
    clean_env.setenv("LOG_LEVEL", "debug")
    config = Config()
    assert config.port == 9001
    assert config.log_level == "DEBUG"

def test_plugin_options_from_config(clean_env):
    clean_env.setenv("OPENAI_API_KEY", "sk-test")
    clean_env.setenv("OPENROUTER_API_KEY", "   ")
    clean_env.setenv("OLLAMA_API_ENDPOINT", "http://localhost:11434")
    options = Config().plugin_options()
    assert options == PluginOptions(enable_openai=True, enable_openrouter=False, enable_ollama=True)

def test_plugin_options_none_set(clean_env):
    assert Config().plugin_options() == PluginOptions()

def test_plugin_options_frozen():
    with pytest.raises(ValidationError):
        PluginOptions().enable_openai = True

def test_provider_keys_mock_fallback():
    keys = ProviderKeys.from_env({})
    assert keys.openai == MOCK_OPENAI_KEY
    assert keys.anthropic == MOCK_ANTHROPIC_KEY
    assert keys.openrouter == MOCK_OPENROUTER_KEY

def test_provider_keys_from_mapping():
    keys = ProviderKeys.from_env({"OPENAI_API_KEY": "sk-1", "ANTHROPIC_API_KEY": ""})
    assert keys.openai == "sk-1"
    assert keys.anthropic == MOCK_ANTHROPIC_KEY

def test_cfg_is_cached():
    assert cfg() is cfg()
