"""
Constants and configuration for the llm‑summarizer service.

All values are loaded from environment variables, allowing the deployment
environment to control behaviour without code changes.  The module groups the
settings by purpose (prompts, logging, server) and validates the
configuration at import time via the ``_StartAppVerificator`` class.

Provider credentials are intentionally absent here: they are read per
request through :class:`llm_summarizer_lib.config.ProviderConfig`.
"""

import os

from llm_summarizer_lib.utils.env import bool_env_value
from llm_summarizer_lib.data_models.constants import (
    DEFAULT_SYSTEM_PROMPT,
    DEFAULT_USER_PROMPT_TEMPLATE,
)

from llm_summarizer_api.base.constants_base import (
    _DontChangeMe,
    POSSIBLE_SERVER_TYPES,
    ServerTypes,
)

# =============================================================================
# PROMPTS
# =============================================================================
# System prompt used when the client sends bare text
SYSTEM_PROMPT = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}SYSTEM_PROMPT", DEFAULT_SYSTEM_PROMPT
)

# User prompt template, ``{text}`` is replaced with the client text
USER_PROMPT_TEMPLATE = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}USER_PROMPT_TEMPLATE",
    DEFAULT_USER_PROMPT_TEMPLATE,
)

# Return only ``{summary}`` instead of the summary with echo metadata
MINIMAL_RESPONSE = bool_env_value(f"{_DontChangeMe.MAIN_ENV_PREFIX}MINIMAL_RESPONSE")

# =============================================================================
# LOGGING
# =============================================================================
# Default name of a logging file
REST_API_LOG_FILE_NAME = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}LOG_FILENAME", "llm-summarizer.log"
).strip()

# Default logging level
REST_API_LOG_LEVEL = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}LOG_LEVEL", "INFO"
).strip()

# Default prefix for each endpoint
DEFAULT_API_PREFIX = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}EP_PREFIX", "/api"
).strip()

# Timeout of a gunicorn worker (0 disables it)
LLM_SUMMARIZER_API_TIMEOUT = int(
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}TIMEOUT", 0)
)

# =============================================================================
# SERVER CONFIGURATION
# =============================================================================
# Type of server, default is flask {flask, gunicorn, waitress}
SERVER_TYPE = (
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}SERVER_TYPE", ServerTypes.FLASK)
    .lower()
    .strip()
)

# Server port, default is 8080
SERVER_PORT = int(
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}SERVER_PORT", "8080").strip()
)

# Number of workers (if server supports multiple workers), default: 2
SERVER_WORKERS_COUNT = int(
    os.environ.get(
        f"{_DontChangeMe.MAIN_ENV_PREFIX}SERVER_WORKERS_COUNT", "2"
    ).strip()
)

# Number of threads (if the server supports multithreading), default: 8
SERVER_THREADS_COUNT = int(
    os.environ.get(
        f"{_DontChangeMe.MAIN_ENV_PREFIX}SERVER_THREADS_COUNT", "8"
    ).strip()
)

# In some servers like gunicorn is able to set worker class (f.e. gevent)
SERVER_WORKERS_CLASS = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}SERVER_WORKER_CLASS", ""
).strip()

if not len(SERVER_WORKERS_CLASS):
    SERVER_WORKERS_CLASS = None

# Server host, default is 0.0.0.0
SERVER_HOST = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}SERVER_HOST", "0.0.0.0"
).strip()

# Run server in debug mode
RUN_IN_DEBUG_MODE = bool_env_value(f"{_DontChangeMe.MAIN_ENV_PREFIX}IN_DEBUG")
if RUN_IN_DEBUG_MODE:
    REST_API_LOG_LEVEL = "DEBUG"


# =============================================================================
# STARTUP VALIDATION
# =============================================================================


class _StartAppVerificator:
    """
    Validate configuration at import time.

        The ``dont_run_if_something_is_wrong`` method raises informative
        exceptions when environment variables contain invalid values.
    """

    @staticmethod
    def __verify_server_type():
        if SERVER_TYPE not in POSSIBLE_SERVER_TYPES:
            raise Exception(
                f"{SERVER_TYPE} is not a valid server type.\n"
                f"Available server types: {POSSIBLE_SERVER_TYPES}\n\n"
            )

    @staticmethod
    def __verify_user_prompt_template():
        if "{text}" not in USER_PROMPT_TEMPLATE:
            raise Exception(
                f"{_DontChangeMe.MAIN_ENV_PREFIX}USER_PROMPT_TEMPLATE must contain "
                "the `{text}` placeholder\n\n"
            )

    def dont_run_if_something_is_wrong(self):
        self.__verify_server_type()
        self.__verify_user_prompt_template()


_StartAppVerificator().dont_run_if_something_is_wrong()
