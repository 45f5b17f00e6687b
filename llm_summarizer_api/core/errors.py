"""
Utility helpers for representing API errors as JSON‑serializable dictionaries.

This module centralizes the creation of error payloads that are returned from
the Flask endpoints.  By keeping the structure in one place, we avoid
repetition and make it easy to evolve the error format in the future.
"""

from typing import Dict, Any, Optional

from llm_summarizer_lib.config import MISSING_CONFIGURATION_MESSAGE

# Error returned when the completion call fails for any reason
ERROR_SUMMARIZATION_FAILED = "Summarization failed."

# Error returned when the provider configuration is incomplete
ERROR_MISSING_CONFIGURATION = MISSING_CONFIGURATION_MESSAGE

# Error returned by the registrar when an endpoint raises unexpectedly
ERROR_INTERNAL = "internal_error"


def error_as_dict(error: str, detail: Optional[str] = None) -> Dict[str, Any]:
    """
    Convert an error identifier and optional detail into a serialisable dictionary.

    Parameters
    ----------
    error : str
        A short, human‑readable error description.
    detail : Optional[str], default ``None``
        Additional context (e.g. the stringified exception).
        If omitted, only the ``error`` key is included in the result.

    Returns
    -------
    Dict[str, Any]
        A dictionary suitable for JSON responses, containing at least the
        ``"error"`` key and, when ``detail`` is supplied, a ``"detail"`` key.

    Examples
    --------
    >>> error_as_dict("missing text or messages")
    {'error': 'missing text or messages'}

    >>> error_as_dict("Summarization failed.", "HTTP 429: rate limited")
    {'error': 'Summarization failed.', 'detail': 'HTTP 429: rate limited'}
    """
    if detail is None:
        return {"error": error}

    return {"error": error, "detail": detail}
