"""
Custom exception hierarchy for the LLM‑Summarizer library.

All public exceptions inherit from :class:`LLMSummarizerError`, allowing
callers to catch a single base class for any summarizer‑related failure while
still being able to differentiate specific error conditions when needed.
"""

from typing import Any, Optional


class LLMSummarizerError(Exception):
    """Base exception for all LLM‑Summarizer‑specific errors."""

    pass


class ConfigurationError(LLMSummarizerError):
    """
    Raised when a required provider setting is absent from the environment
    or a provided one cannot be used.

    Attributes
    ----------
    missing : list
        Names of required environment variables that are unset.
    invalid : list
        Names of environment variables holding unusable values.
    """

    def __init__(
        self,
        message: str,
        missing: Optional[list] = None,
        invalid: Optional[list] = None,
    ):
        super().__init__(message)
        self.missing = list(missing or [])
        self.invalid = list(invalid or [])


class ValidationError(LLMSummarizerError):
    """Raised when the client request carries neither ``text`` nor ``messages``."""

    pass


class UpstreamError(LLMSummarizerError):
    """
    Raised when the completion provider answers with a non‑success status.

    Attributes
    ----------
    status : int
        HTTP status code returned by the provider.
    message : str
        Best‑effort message taken from ``error.message`` of the response body.
    raw_body : Any
        The parsed JSON body, kept for diagnostics only.
    """

    def __init__(self, status: int, message: str, raw_body: Any = None):
        super().__init__(f"HTTP {status}: {message}")
        self.status = status
        self.message = message
        self.raw_body = raw_body
