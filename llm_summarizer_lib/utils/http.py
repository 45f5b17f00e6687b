"""
Thin wrapper around ``requests`` used to talk to the completion provider.

The :class:`AzureOpenAIRequester` class centralises:

* construction of absolute URLs from a base URL,
* automatic inclusion of the ``api-key`` secret header,
* an explicit per‑request timeout,
* a session without any retry policy (every call is a single attempt).

Status handling is left to the caller, because the provider's JSON body is
needed both for successful and for failed responses.
"""

import logging
from typing import Any, Dict, Optional

import requests
from requests.adapters import HTTPAdapter

API_KEY_HEADER = "api-key"


class AzureOpenAIRequester:
    """
    Helper for making HTTP calls to an Azure OpenAI resource.

    Parameters
    ----------
    base_url : str
        Base URL of the resource (e.g. ``"https://my.openai.azure.com"``).
        Trailing slashes are stripped automatically.
    api_key : str
        Secret sent in the ``api-key`` header; if empty, no header is added.
    timeout : float, default ``300``
        Per‑request timeout in seconds.
    logger : Optional[logging.Logger]
        Logger instance; if omitted, a module‑level logger is created.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = 300,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})

        if api_key:
            self.session.headers.update({API_KEY_HEADER: api_key})

        self.logger = logger or logging.getLogger(__name__)

        # single attempt, no retries on transient failures
        adapter = HTTPAdapter(max_retries=0)
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)

    def full_url(self, path: str) -> str:
        """
        Build the absolute URL for a request.

        Parameters
        ----------
        path : str
            URL path (optionally with a query string) appended to
            ``self.base_url``.  Exactly one ``/`` separates the two.

        Returns
        -------
        str
            Fully qualified URL.
        """
        return f"{self.base_url}{path if path.startswith('/') else '/' + path}"

    def post(
        self, path: str, json: Optional[Dict[str, Any]] = None, **kwargs
    ) -> requests.Response:
        """
        Perform a ``POST`` request with a JSON body.

        Parameters
        ----------
        path : str
            Relative URL path to post to.
        json : Optional[Dict[str, Any]]
            JSON‑serialisable payload sent as the request body.
        **kwargs
            Additional arguments forwarded to ``requests.Session.post``.

        Returns
        -------
        requests.Response
            The raw response; the status code is not inspected here.

        Raises
        ------
        requests.RequestException
            On connection problems or timeout.
        """
        url = self.full_url(path)
        self.logger.debug(
            "POST %s | messages=%d", url, len((json or {}).get("messages") or [])
        )
        try:
            return self.session.post(url, json=json, timeout=self.timeout, **kwargs)
        finally:
            self.session.close()
