"""
Endpoint abstraction layer for the LLM‑summarizer REST service.

The module defines an abstract base class that represents a *single* HTTP
endpoint.  Concrete implementations inherit from it and provide the actual
request handling logic.

The class exposes a small public API:

* ``name`` – the URL path of the endpoint.
* ``method`` – the HTTP verb the endpoint expects (only POST is served).
* ``run_ep`` – the entry point called by the Flask registrar; it returns a
  ``(body, status_code)`` tuple.
"""

import abc
import logging

from typing import Optional, Dict, Any, Tuple

from llm_summarizer_lib.utils.logger import prepare_logger

from llm_summarizer_api.base.constants import REST_API_LOG_LEVEL


class EndpointI(abc.ABC):
    """
    Abstract representation of a single REST endpoint.

    Attributes
    ----------
    _ep_name: str
        Relative URL path of the endpoint (e.g. ``"summarize"``).
    _ep_method: str
        HTTP method this endpoint expects, always ``"POST"``.
    logger: logging.Logger
        Logger configured with the supplied log file and level.
    """

    METHODS = ["POST"]
    """Supported HTTP methods for any endpoint."""

    def __init__(
        self,
        ep_name: str,
        method: str = "POST",
        logger_level: Optional[str] = REST_API_LOG_LEVEL,
        logger_file_name: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialise an endpoint definition.

        Parameters
        ----------
        ep_name :
            URL fragment that identifies this endpoint (e.g. ``"summarize"``).
        method :
            HTTP verb the endpoint will respond to; defaults to ``"POST"``.
            Must be one of :attr:`METHODS`.
        logger_level :
            Logging level name (``"INFO"``, ``"DEBUG"``, …).
        logger_file_name :
            Path to a file where log records will be written.  When
            ``None`` only the stream handler is used.
        logger :
            Ready logger; overrides ``logger_level`` and ``logger_file_name``.

        Raises
        ------
        ValueError
            If ``method`` is not listed in :attr:`METHODS`.
        """
        self._check_method_is_allowed(method=method)

        self._ep_name = ep_name
        self._ep_method = method.upper()
        self.logger = logger or prepare_logger(
            logger_name=__name__,
            logger_file_name=logger_file_name,
            log_level=logger_level,
        )

    # ------------------------------------------------------------------
    # Public read‑only properties
    # ------------------------------------------------------------------
    @property
    def name(self):
        """
        Return the raw endpoint name as supplied to the constructor.

        The value is used by the Flask registrar to build the final route.
        """
        return self._ep_name

    @property
    def method(self):
        """
        Return the HTTP verb this endpoint expects.
        """
        return self._ep_method

    # ------------------------------------------------------------------
    # Core workflow
    # ------------------------------------------------------------------
    @abc.abstractmethod
    def run_ep(self, params: Optional[Dict[str, Any]]) -> Tuple[Dict[str, Any], int]:
        """
        Execute the endpoint for a given request payload.

        Parameters
        ----------
        params :
            Dictionary of request parameters extracted by the Flask
            registrar.  May be ``None`` for an empty body.

        Returns
        -------
        Tuple[dict, int]
            JSON‑serialisable body and the HTTP status code.
        """
        raise NotImplementedError()

    # ------------------------------------------------------------------
    # Helper utilities for standardised JSON responses
    # ------------------------------------------------------------------
    @staticmethod
    def return_response_ok(body: Dict[str, Any]) -> Tuple[Dict[str, Any], int]:
        return body, 200

    @staticmethod
    def return_response_not_ok(
        body: Dict[str, Any], status_code: int = 500
    ) -> Tuple[Dict[str, Any], int]:
        return body, status_code

    def _check_method_is_allowed(self, method: str) -> None:
        if method is None or method.upper() not in self.METHODS:
            raise ValueError(
                f"Unsupported method {method}. Supported: {', '.join(self.METHODS)}"
            )
