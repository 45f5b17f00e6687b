from llm_summarizer_lib.config import ProviderConfig
from llm_summarizer_lib.client import AzureChatCompletionClient
from llm_summarizer_lib.normalizer import RequestNormalizer, normalize_messages
from llm_summarizer_lib.data_models.chat import (
    ChatMessage,
    CompletionResult,
    PromptTemplate,
)
from llm_summarizer_lib.exceptions import (
    LLMSummarizerError,
    ConfigurationError,
    ValidationError,
    UpstreamError,
)

__all__ = [
    "ProviderConfig",
    "AzureChatCompletionClient",
    "RequestNormalizer",
    "normalize_messages",
    "ChatMessage",
    "CompletionResult",
    "PromptTemplate",
    "LLMSummarizerError",
    "ConfigurationError",
    "ValidationError",
    "UpstreamError",
]
