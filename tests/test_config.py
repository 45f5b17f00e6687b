import pytest

from llm_summarizer_lib.config import ProviderConfig, MISSING_CONFIGURATION_MESSAGE
from llm_summarizer_lib.exceptions import ConfigurationError
from llm_summarizer_lib.utils.env import bool_env_value


def test_from_env_with_defaults(clean_env):
    clean_env.setenv("AZURE_OPENAI_ENDPOINT", "https://res.openai.azure.com")
    clean_env.setenv("AZURE_OPENAI_API_KEY", "k")
    clean_env.setenv("AZURE_OPENAI_DEPLOYMENT", "dep")

    config = ProviderConfig.from_env()

    assert config.endpoint == "https://res.openai.azure.com"
    assert config.api_version == "2024-10-21"
    assert config.temperature == 0.3
    assert config.max_tokens == 500
    assert config.timeout == 300


def test_from_env_overrides():
    config = ProviderConfig.from_env(
        {
            "AZURE_OPENAI_ENDPOINT": "https://res",
            "AZURE_OPENAI_API_KEY": "k",
            "AZURE_OPENAI_DEPLOYMENT": "dep",
            "AZURE_OPENAI_API_VERSION": "2025-01-01-preview",
            "AZURE_OPENAI_TIMEOUT": "7.5",
            "AZURE_OPENAI_TEMPERATURE": "0",
            "AZURE_OPENAI_MAX_TOKENS": "128",
        }
    )

    assert config.api_version == "2025-01-01-preview"
    assert config.timeout == 7.5
    assert config.temperature == 0.0
    assert config.max_tokens == 128


@pytest.mark.parametrize(
    "missing",
    ["AZURE_OPENAI_ENDPOINT", "AZURE_OPENAI_API_KEY", "AZURE_OPENAI_DEPLOYMENT"],
)
def test_missing_required_value(missing):
    environ = {
        "AZURE_OPENAI_ENDPOINT": "https://res",
        "AZURE_OPENAI_API_KEY": "k",
        "AZURE_OPENAI_DEPLOYMENT": "dep",
    }
    environ[missing] = "  "

    with pytest.raises(ConfigurationError) as exc:
        ProviderConfig.from_env(environ)

    assert exc.value.missing == [missing]
    assert str(exc.value) == MISSING_CONFIGURATION_MESSAGE


def test_config_is_immutable(provider_config):
    with pytest.raises(Exception):
        provider_config.api_key = "other"


@pytest.mark.parametrize(
    "value, expected",
    [("1", True), ("TRUE", True), (" yes ", True), ("0", False), ("no", False)],
)
def test_bool_env_value(value, expected):
    assert bool_env_value("FLAG", environ={"FLAG": value}) is expected


def test_bool_env_value_default():
    assert bool_env_value("FLAG", default=True, environ={}) is True


@pytest.mark.parametrize(
    "name, value",
    [
        ("AZURE_OPENAI_MAX_TOKENS", "lots"),
        ("AZURE_OPENAI_MAX_TOKENS", "0"),
        ("AZURE_OPENAI_TIMEOUT", "0"),
        ("AZURE_OPENAI_TIMEOUT", "-5"),
        ("AZURE_OPENAI_TEMPERATURE", "warm"),
    ],
)
def test_unusable_optional_value(name, value):
    environ = {
        "AZURE_OPENAI_ENDPOINT": "https://res",
        "AZURE_OPENAI_API_KEY": "k",
        "AZURE_OPENAI_DEPLOYMENT": "dep",
        name: value,
    }

    with pytest.raises(ConfigurationError) as exc:
        ProviderConfig.from_env(environ)

    assert exc.value.invalid == [name]
    assert exc.value.missing == []
    assert name in str(exc.value)
