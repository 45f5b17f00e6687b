"""
llm_summarizer_api.core.engine
==============================

This module provides the :class:`FlaskEngine` class, which builds and
configures a Flask application for the LLM‑summarizer REST API.  The engine
instantiates the service endpoints (by default only
:class:`~llm_summarizer_api.endpoints.summarize.SummarizeEndpoint`) and
registers them under the API prefix defined by
:data:`~llm_summarizer_api.base.constants.DEFAULT_API_PREFIX`.

Typical usage
-------------
>>> engine = FlaskEngine(logger_file_name="llm-summarizer.log")
>>> app = engine.prepare_flask_app()
>>> app.run()
"""

from flask import Flask
from typing import List, Optional

from llm_summarizer_api.endpoints.endpoint_i import EndpointI
from llm_summarizer_api.endpoints.summarize import SummarizeEndpoint
from llm_summarizer_api.register.register import FlaskEndpointRegistrar
from llm_summarizer_api.base.constants import (
    DEFAULT_API_PREFIX,
    REST_API_LOG_LEVEL,
)


class FlaskEngine:
    """
    Engine responsible for creating a Flask application with the
    summarizer endpoints registered.

    Parameters
    ----------
    endpoints : Optional[List[EndpointI]], optional
        Ready endpoint instances.  When ``None`` the default endpoints are
        created with the engine's logger settings.
    logger_file_name : Optional[str], optional
        File name for the endpoints' logger output.
    logger_level : Optional[str], optional
        Logging level; defaults to
        :data:`~llm_summarizer_api.base.constants.REST_API_LOG_LEVEL`.
    url_prefix : str, optional
        Prefix of every route; defaults to
        :data:`~llm_summarizer_api.base.constants.DEFAULT_API_PREFIX`.

    Notes
    -----
    The engine does not start the Flask server; it only prepares the
    application instance.  The caller is responsible for running the app
    (e.g., via ``app.run()`` or a WSGI server such as Gunicorn).
    """

    def __init__(
        self,
        endpoints: Optional[List[EndpointI]] = None,
        logger_file_name: Optional[str] = None,
        logger_level: Optional[str] = REST_API_LOG_LEVEL,
        url_prefix: str = DEFAULT_API_PREFIX,
    ) -> None:
        self.endpoints = endpoints
        self.url_prefix = url_prefix

        self.logger_level = logger_level
        self.logger_file_name = logger_file_name

    def prepare_flask_app(self) -> Flask:
        """
        Create and configure the Flask application.

        Returns
        -------
        Flask
            A Flask instance with all endpoints registered.

        Raises
        ------
        RuntimeError
            If endpoint registration fails for any reason.
        """
        flask_app = Flask(__name__)
        try:
            self.__register_instances(
                application=flask_app,
                instances=self.endpoints or self.__default_endpoints(),
                url_prefix=self.url_prefix,
            )
        except RuntimeError as e:
            raise RuntimeError(f"Failed to register endpoints: {e}")

        return flask_app

    def __default_endpoints(self) -> List[EndpointI]:
        return [
            SummarizeEndpoint(
                logger_file_name=self.logger_file_name,
                logger_level=self.logger_level,
            )
        ]

    @staticmethod
    def __register_instances(
        application: Flask, instances: List[EndpointI], url_prefix: str
    ):
        """
        Register a collection of endpoint instances with a Flask application.

        Parameters
        ----------
        application : Flask
            The Flask app to which the endpoints will be attached.
        instances : List[EndpointI]
            A list of endpoint objects to register.
        url_prefix : str
            Prefix prepended to every endpoint route.
        """
        with FlaskEndpointRegistrar(
            app=application, url_prefix=url_prefix
        ) as registrar:
            registrar.register_endpoints(endpoints=instances)


def create_app(
    endpoints: Optional[List[EndpointI]] = None,
    logger_file_name: Optional[str] = None,
    logger_level: Optional[str] = REST_API_LOG_LEVEL,
) -> Flask:
    """WSGI application factory (``gunicorn 'llm_summarizer_api.core.engine:create_app()'``)."""
    return FlaskEngine(
        endpoints=endpoints,
        logger_file_name=logger_file_name,
        logger_level=logger_level,
    ).prepare_flask_app()
