"""
Entry point for launching the LLM‑Summarizer REST server.

The script selects a WSGI server (Flask, Gunicorn or Waitress) based on
command‑line flags **or** the ``LLM_SUMMARIZER_SERVER_TYPE`` environment
variable.  It then starts the chosen server on ``0.0.0.0:8080`` (or the
values taken from ``llm_summarizer_api.base.constants``).

Typical usage
---------------
>>> python -m llm_summarizer_api.rest_api --gunicorn   # production
>>> python -m llm_summarizer_api.rest_api --waitress   # production, Windows‑friendly
>>> python -m llm_summarizer_api.rest_api              # development server (Flask)

"""

import logging
import argparse

from typing import List, Optional

from llm_summarizer_api.core.server import run_server
from llm_summarizer_api.base.constants_base import ServerTypes
from llm_summarizer_api.base.constants import (
    SERVER_TYPE,
    SERVER_PORT,
    SERVER_HOST,
    SERVER_WORKERS_COUNT,
    SERVER_THREADS_COUNT,
    SERVER_WORKERS_CLASS,
    LLM_SUMMARIZER_API_TIMEOUT,
    RUN_IN_DEBUG_MODE,
)

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command‑line arguments.

    Returns
    -------
    argparse.Namespace
        Namespace with the parsed options; defaults are taken from the
        ``llm_summarizer_api.base.constants`` module.
    """
    parser = argparse.ArgumentParser(
        description="Start LLM‑Summarizer API with the chosen WSGI server"
    )
    parser.add_argument(
        "--gunicorn",
        action="store_true",
        help="Force using Gunicorn (production)",
    )
    parser.add_argument(
        "--waitress",
        action="store_true",
        help="Force using Waitress (production, Windows‑friendly)",
    )
    parser.add_argument(
        "--host",
        default=SERVER_HOST,
        help="Interface to bind to (default: %(default)s)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=SERVER_PORT,
        help="Port number (default: %(default)s)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=SERVER_WORKERS_COUNT,
        help="Number of worker processes (Gunicorn only)",
    )
    parser.add_argument(
        "--threads",
        type=int,
        default=SERVER_THREADS_COUNT,
        help="Number of threads (Gunicorn/Waitress)",
    )
    return parser.parse_args(argv)


def choose_server(args: argparse.Namespace) -> str:
    # CLI flags have priority over the ``SERVER_TYPE`` env variable
    if args.gunicorn:
        return ServerTypes.GUNICORN
    if args.waitress:
        return ServerTypes.WAITRESS
    return SERVER_TYPE


def main(argv: Optional[List[str]] = None) -> None:
    """
    Select the server backend and start it.
    """
    args = _parse_args(argv)
    server_choice = choose_server(args)

    logger.info("Starting LLM‑Summarizer API with %s", server_choice)

    try:
        run_server(
            server_type=server_choice,
            host=args.host,
            port=args.port,
            workers=args.workers,
            threads=args.threads,
            timeout=LLM_SUMMARIZER_API_TIMEOUT,
            worker_class=SERVER_WORKERS_CLASS,
            debug=RUN_IN_DEBUG_MODE,
        )
    except Exception:
        logger.exception("Failed to start the server")
        raise


if __name__ == "__main__":
    # Basic logging configuration for the “script” execution path.
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    main()
