"""
Launching the summarizer application under a WSGI server.

:func:`run_server` takes the application built by
:func:`~llm_summarizer_api.core.engine.create_app` and hands it to one of the
supported backends (see :class:`~llm_summarizer_api.base.constants_base.ServerTypes`):

* ``flask``    – Werkzeug development server,
* ``gunicorn`` – pre‑fork workers with threads, configured programmatically,
* ``waitress`` – pure‑Python threaded server.

Gunicorn and Waitress are optional (``pip install llm-summarizer[api]``) and
imported only when selected.
"""

import logging

from flask import Flask
from typing import Any, Dict, Optional

from llm_summarizer_lib.data_models.constants import DEFAULT_EXTERNAL_TIMEOUT

from llm_summarizer_api.core.engine import create_app
from llm_summarizer_api.base.constants_base import ServerTypes
from llm_summarizer_api.base.constants import (
    REST_API_LOG_FILE_NAME,
    REST_API_LOG_LEVEL,
)

logger = logging.getLogger(__name__)


def gunicorn_options(
    host: str,
    port: int,
    workers: int,
    threads: int,
    timeout: int,
    debug: bool = False,
    worker_class: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build the Gunicorn settings for the summarizer.

    Parameters
    ----------
    host, port : str, int
        Bind address.
    workers, threads : int
        Worker processes and threads per worker.
    timeout : int
        Worker timeout in seconds; ``0`` disables it.
    debug : bool
        Use the ``debug`` log level instead of ``info``.
    worker_class : Optional[str]
        Gunicorn worker class (e.g. ``"gthread"``); Gunicorn's default when
        ``None`` or blank.

    Returns
    -------
    Dict[str, Any]
        Settings accepted by ``gunicorn.config.Config.set``.
    """
    options = {
        "bind": f"{host}:{port}",
        "workers": workers,
        "threads": threads,
        "timeout": timeout,
        "loglevel": "debug" if debug else "info",
        "accesslog": "-",
        "errorlog": "-",
    }
    if worker_class and worker_class.strip():
        options["worker_class"] = worker_class.strip()
    return options


def _serve_gunicorn(app: Flask, options: Dict[str, Any]) -> None:
    try:
        from gunicorn.app.base import BaseApplication
    except ImportError:
        raise ImportError(
            "Gunicorn is not installed. Install it with: pip install gunicorn"
        )

    class SummarizerGunicornApp(BaseApplication):
        def __init__(self, application: Flask, settings: Dict[str, Any]):
            self.application = application
            self.options = settings
            super().__init__()

        def load_config(self):
            for key, value in self.options.items():
                self.cfg.set(key, value)

        def load(self):
            return self.application

    SummarizerGunicornApp(app, options).run()


def _serve_waitress(app: Flask, host: str, port: int, threads: int) -> None:
    try:
        from waitress import serve
    except ImportError:
        raise ImportError(
            "Waitress is not installed. Install it with: pip install waitress"
        )

    # idle connections are kept as long as a default provider call may take
    serve(
        app,
        host=host,
        port=port,
        threads=threads,
        channel_timeout=DEFAULT_EXTERNAL_TIMEOUT,
    )


def run_server(
    server_type: str,
    host: str,
    port: int,
    workers: int = 2,
    threads: int = 8,
    timeout: int = 0,
    worker_class: Optional[str] = None,
    debug: bool = False,
    app: Optional[Flask] = None,
) -> None:
    """
    Serve the summarizer with the chosen backend.

    Parameters
    ----------
    server_type : str
        One of ``flask``, ``gunicorn`` or ``waitress``.
    host, port : str, int
        Bind address.
    workers : int
        Gunicorn worker processes (ignored by the other backends).
    threads : int
        Request threads (Gunicorn per worker, Waitress in total).
    timeout : int
        Gunicorn worker timeout, see :func:`gunicorn_options`.
    worker_class : Optional[str]
        Gunicorn worker class.
    debug : bool
        Debug logging (and the Werkzeug debugger for ``flask``).
    app : Optional[Flask]
        Prepared application; built with :func:`create_app` when omitted.

    Raises
    ------
    ValueError
        If ``server_type`` is unknown.
    """
    if app is None:
        app = create_app(
            logger_file_name=REST_API_LOG_FILE_NAME,
            logger_level="DEBUG" if debug else REST_API_LOG_LEVEL,
        )

    logger.info(f"Serving summarizer with {server_type} on {host}:{port}")

    if server_type == ServerTypes.GUNICORN:
        _serve_gunicorn(
            app,
            gunicorn_options(
                host=host,
                port=port,
                workers=workers,
                threads=threads,
                timeout=timeout,
                debug=debug,
                worker_class=worker_class,
            ),
        )
    elif server_type == ServerTypes.WAITRESS:
        _serve_waitress(app, host=host, port=port, threads=threads)
    elif server_type == ServerTypes.FLASK:
        app.run(host=host, port=port, debug=debug)
    else:
        raise ValueError(f"Unknown server type: {server_type}")
