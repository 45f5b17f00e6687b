"""
Provider configuration for the completion client.

:class:`ProviderConfig` is an explicitly constructed, immutable settings
object.  It is built from the process environment (``from_env``) or passed in
directly, so the completion client never reads global state on its own.
"""

import os

from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from llm_summarizer_lib.exceptions import ConfigurationError
from llm_summarizer_lib.data_models.constants import (
    DEFAULT_API_VERSION,
    DEFAULT_EXTERNAL_TIMEOUT,
    DEFAULT_MAX_TOKENS,
    DEFAULT_TEMPERATURE,
    ENV_API_KEY,
    ENV_API_VERSION,
    ENV_DEPLOYMENT,
    ENV_ENDPOINT,
    ENV_MAX_TOKENS,
    ENV_TEMPERATURE,
    ENV_TIMEOUT,
    REQUIRED_PROVIDER_ENVS,
)

MISSING_CONFIGURATION_MESSAGE = (
    "Server is missing configuration. Set "
    f"{', '.join(REQUIRED_PROVIDER_ENVS)}."
)

# Model field -> environment variable of the optional settings
OPTIONAL_PROVIDER_ENVS = {
    "api_version": ENV_API_VERSION,
    "timeout": ENV_TIMEOUT,
    "temperature": ENV_TEMPERATURE,
    "max_tokens": ENV_MAX_TOKENS,
}


class ProviderConfig(BaseModel):
    """
    Settings of the Azure OpenAI deployment used for summarization.

    Attributes
    ----------
    endpoint : str
        Base URL of the Azure OpenAI resource.
    api_key : str
        Secret sent in the ``api-key`` header.
    deployment : str
        Deployment identifier selecting the hosted model.
    api_version : str, default ``"2024-10-21"``
        Value of the ``api-version`` query parameter.
    timeout : float, default ``300``
        Timeout (seconds) of the outbound call.
    temperature : float, default ``0.3``
        Sampling temperature sent with every request.
    max_tokens : int, default ``500``
        Maximum number of generated tokens.
    """

    model_config = ConfigDict(frozen=True)

    endpoint: str
    api_key: str
    deployment: str
    api_version: str = DEFAULT_API_VERSION
    timeout: float = Field(default=DEFAULT_EXTERNAL_TIMEOUT, gt=0)
    temperature: float = DEFAULT_TEMPERATURE
    max_tokens: int = Field(default=DEFAULT_MAX_TOKENS, gt=0)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ProviderConfig":
        """
        Build the configuration from environment variables.

        Parameters
        ----------
        environ : Mapping[str, str], optional
            Mapping used instead of ``os.environ``.

        Returns
        -------
        ProviderConfig
            Configuration with optional values falling back to their defaults.

        Raises
        ------
        ConfigurationError
            If ``AZURE_OPENAI_ENDPOINT``, ``AZURE_OPENAI_API_KEY`` or
            ``AZURE_OPENAI_DEPLOYMENT`` is unset or blank, or when an optional
            numeric setting cannot be parsed or is not positive.
        """
        environ = os.environ if environ is None else environ

        def _value(name: str) -> str:
            return (environ.get(name) or "").strip()

        missing = [name for name in REQUIRED_PROVIDER_ENVS if not _value(name)]
        if missing:
            raise ConfigurationError(MISSING_CONFIGURATION_MESSAGE, missing=missing)

        # optional values are passed only when set, pydantic coerces the strings
        values = {
            "endpoint": _value(ENV_ENDPOINT),
            "api_key": _value(ENV_API_KEY),
            "deployment": _value(ENV_DEPLOYMENT),
        }
        for field_name, env_name in OPTIONAL_PROVIDER_ENVS.items():
            if _value(env_name):
                values[field_name] = _value(env_name)

        try:
            return cls(**values)
        except PydanticValidationError as exc:
            invalid = sorted(
                {
                    OPTIONAL_PROVIDER_ENVS.get(str(err["loc"][0]), str(err["loc"][0]))
                    for err in exc.errors()
                    if err.get("loc")
                }
            )
            raise ConfigurationError(
                f"Server has invalid configuration. Check {', '.join(invalid)}.",
                invalid=invalid,
            ) from exc
