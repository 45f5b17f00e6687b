"""
FlaskEndpointRegistrar

A tiny helper that wires `llm_summarizer_api.endpoints.endpoint_i.EndpointI`
objects into a Flask application (or Blueprint).
Only the registration logic is kept – validation of the request body is left
to the endpoint implementation itself.
"""

from __future__ import annotations

import logging

from flask import Flask, Blueprint, request, jsonify
from typing import Callable, Iterable, Any, Set, Tuple, Optional

from llm_summarizer_lib.utils.logger import prepare_logger

from llm_summarizer_api.endpoints.endpoint_i import EndpointI
from llm_summarizer_api.base.constants import DEFAULT_API_PREFIX
from llm_summarizer_api.core.errors import error_as_dict, ERROR_INTERNAL


class FlaskEndpointRegistrar:
    """
    Register ``EndpointI`` instances as Flask routes.

    Parameters
    ----------
    app : Flask, optional
        Flask application that will receive the routes.
        Either *app* or *blueprint* must be supplied.
    blueprint : Blueprint, optional
        Blueprint to which the routes will be attached.
    url_prefix : str, optional
        Prefix prepended to every endpoint URL (e.g. ``"/api"``).
    logger : logging.Logger, optional
        Logger used for diagnostic messages.
        If omitted, a module‑level logger is created.
    """

    def __init__(
        self,
        app: Optional[Flask] = None,
        blueprint: Optional[Blueprint] = None,
        url_prefix: str = DEFAULT_API_PREFIX,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        if app is None and blueprint is None:
            raise ValueError("Either `app` or `blueprint` must be provided")

        self._app = app
        self._bp = blueprint

        self._prefix = ""
        if url_prefix and len(url_prefix):
            if not url_prefix.startswith("/"):
                url_prefix = "/" + url_prefix
            self._prefix = url_prefix.rstrip("/")

        self._logger = logger or prepare_logger(__name__)
        self._registered_rules: Set[Tuple[str, str]] = set()

    @property
    def registered_rules(self) -> Set[Tuple[str, str]]:
        return set(self._registered_rules)

    def register_endpoints(self, endpoints: Iterable[EndpointI]) -> None:
        """
        Register a collection of endpoints.

        Parameters
        ----------
        endpoints : Iterable[EndpointI]
            Any iterable producing concrete ``EndpointI`` objects.
        """
        for ep in endpoints:
            self.register_endpoint(ep)

    def register_endpoint(self, endpoint: EndpointI) -> None:
        """
        Register a single endpoint as a Flask view.

        The view extracts the JSON body and forwards it to ``endpoint.run_ep``;
        the returned ``(body, status)`` pair is sent back as JSON.

        Parameters
        ----------
        endpoint : EndpointI
            Concrete endpoint implementation.

        Raises
        ------
        RuntimeError
            If a route with the same URL and HTTP method has already been registered.
        """
        url = endpoint.name
        method = endpoint.method.upper()

        # Normalize the rule – ensure it starts with a slash and prepend prefix
        if not url.startswith("/"):
            url = "/" + url
        full_rule = f"{self._prefix}{url}"

        # Detect duplicates
        key = (full_rule, method)
        if key in self._registered_rules:
            raise RuntimeError(f"Duplicate route: {method} {full_rule}")
        self._registered_rules.add(key)

        view = self._make_view(endpoint)
        endpoint_name = f"{endpoint.__class__.__name__}:{method}:{full_rule}"

        target = self._bp if self._bp is not None else self._app
        target.add_url_rule(
            full_rule,
            endpoint=endpoint_name,
            view_func=view,
            methods=[method],
        )

        self._logger.info(
            f"Registered endpoint {method} {full_rule} "
            f"({endpoint.__class__.__name__})",
        )

    def _make_view(self, endpoint: EndpointI) -> Callable[[], Any]:
        """
        Actual view function generator.

        No argument validation, just body extraction and a call to
        ``endpoint.run_ep``.
        """

        def handler():
            params = self._extract_params()
            try:
                body, status = endpoint.run_ep(params)
            except Exception as exc:
                # any error escaping the endpoint -> 500
                self._logger.exception(
                    f"Unhandled exception in endpoint: "
                    f"{endpoint.__class__.__name__}",
                )
                return (
                    jsonify(error_as_dict(error=ERROR_INTERNAL, detail=str(exc))),
                    500,
                )
            return jsonify(body or {}), status

        return handler

    @staticmethod
    def _extract_params() -> Any:
        """
        Parse the request body as JSON regardless of the content type;
        an unparsable body yields an empty dict.
        """
        data = request.get_json(force=True, silent=True)
        return data if data is not None else {}

    def __enter__(self) -> "FlaskEndpointRegistrar":
        """
        Enter the runtime context and return the registrar instance.
        This makes ``FlaskEndpointRegistrar`` usable with the ``with`` statement.
        """
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        """
        Exit the runtime context.

        No special cleanup is required for the registrar, so we simply return
        ``False`` to propagate any exception that occurred inside the `with` block.
        """
        return False
