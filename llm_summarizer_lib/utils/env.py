import os
from typing import Mapping, Optional

TRUE_VALUES = ("1", "true", "yes", "t", "y", "on")


def bool_env_value(
    env_name: str, default: bool = False, environ: Optional[Mapping[str, str]] = None
) -> bool:
    """
    Interpret an environment variable as a boolean flag.

    Parameters
    ----------
    env_name : str
        Name of the environment variable.
    default : bool, default ``False``
        Value returned when the variable is unset or empty.
    environ : Mapping[str, str], optional
        Mapping used instead of ``os.environ`` (handy in tests).

    Returns
    -------
    bool
        ``True`` when the value is one of ``1/true/yes/t/y/on``.
    """
    environ = os.environ if environ is None else environ
    value = environ.get(env_name, "")
    if value is None or not len(value.strip()):
        return default
    return value.strip().lower() in TRUE_VALUES
