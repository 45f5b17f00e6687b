class _DontChangeMe:
    MAIN_ENV_PREFIX = "LLM_SUMMARIZER_"


class ServerTypes:
    FLASK = "flask"
    GUNICORN = "gunicorn"
    WAITRESS = "waitress"


POSSIBLE_SERVER_TYPES = [
    ServerTypes.FLASK,
    ServerTypes.GUNICORN,
    ServerTypes.WAITRESS,
]
