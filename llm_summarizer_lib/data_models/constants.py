TEXT_PARAM = "text"
MESSAGES_PARAM = "messages"

ROLE_SYSTEM = "system"
ROLE_USER = "user"
ROLE_ASSISTANT = "assistant"

# Placeholder replaced with the client text in the user prompt template
TEXT_PLACEHOLDER = "{text}"

DEFAULT_SYSTEM_PROMPT = (
    "You are a browser-embedded AI assistant. Summarize accurately and "
    "concisely. Prefer bullet points. If info is missing, say so."
)

DEFAULT_USER_PROMPT_TEMPLATE = (
    f"Summarize the following text in 5 bullets:\n\n{TEXT_PLACEHOLDER}"
)

# Generation defaults sent with every completion request
DEFAULT_TEMPERATURE = 0.3
DEFAULT_MAX_TOKENS = 500

DEFAULT_API_VERSION = "2024-10-21"

# Timeout (seconds) of the call to the completion provider
DEFAULT_EXTERNAL_TIMEOUT = 300

# Provider environment variables
ENV_ENDPOINT = "AZURE_OPENAI_ENDPOINT"
ENV_API_KEY = "AZURE_OPENAI_API_KEY"
ENV_DEPLOYMENT = "AZURE_OPENAI_DEPLOYMENT"
ENV_API_VERSION = "AZURE_OPENAI_API_VERSION"
ENV_TIMEOUT = "AZURE_OPENAI_TIMEOUT"
ENV_TEMPERATURE = "AZURE_OPENAI_TEMPERATURE"
ENV_MAX_TOKENS = "AZURE_OPENAI_MAX_TOKENS"

REQUIRED_PROVIDER_ENVS = [ENV_ENDPOINT, ENV_API_KEY, ENV_DEPLOYMENT]

UPSTREAM_FALLBACK_ERROR = "Azure OpenAI call failed"
