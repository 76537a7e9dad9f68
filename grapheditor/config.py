"""Configuration helpers for loading environment variables.

Values defined in the project-level ``.env`` file are loaded once, before the
first lookup. Variables already present in the process environment take
precedence over the file. Consumers should go through :func:`get_env` (or the
typed helpers) rather than :func:`os.getenv` so that loading happens in one
place.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@lru_cache(maxsize=1)
def _load_environment() -> None:
    """Load environment variables from the project's ``.env`` file.

    Falls back to the default ``python-dotenv`` discovery when the repository
    root has no ``.env``. The result is cached so the file is read once per
    process; call ``_load_environment.cache_clear()`` to force a reload.
    """

    project_root = Path(__file__).resolve().parents[1]
    env_path = project_root / ".env"

    if env_path.exists():
        load_dotenv(env_path, override=False)
    else:
        load_dotenv(override=False)


def get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Return the value for ``key`` from the environment.

    Parameters
    ----------
    key:
        The name of the environment variable to look up.
    default:
        The value to return when ``key`` is not present.
    """

    _load_environment()
    return os.environ.get(key, default)


def get_bool_env(key: str, default: bool = False) -> bool:
    """Interpret ``key`` as a boolean flag."""

    raw = get_env(key)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"Environment variable {key} is not a boolean: {raw!r}")


def get_float_env(key: str, default: float) -> float:
    """Interpret ``key`` as a float, falling back to ``default`` when unset."""

    raw = get_env(key)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"Environment variable {key} is not a number: {raw!r}") from None


__all__ = ["get_bool_env", "get_env", "get_float_env"]
