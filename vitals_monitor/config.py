"""Central configuration for the vitals monitor."""
import logging
import os

_TRUTHY = ("1", "true", "yes", "on")
_FALSY = ("0", "false", "no", "off")


def _int_env(name: str, default: int, minimum: int = 1, maximum: int | None = None) -> int:
    """Read an integer environment variable bounded by ``minimum`` and ``maximum``."""

    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    if maximum is not None and value > maximum:
        raise ValueError(f"{name} must be <= {maximum}, got {value}")
    return value


def _probability_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be between 0 and 1, got {value}")
    return value


def _bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    flag = raw.strip().lower()
    if flag in _TRUTHY:
        return True
    if flag in _FALSY:
        return False
    raise ValueError(f"{name} must be one of {_TRUTHY + _FALSY}, got {raw!r}")


def _log_level_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    level = raw.strip().upper()
    # getLevelName maps registered names to their numeric level
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"{name} must be a logging level name, got {raw!r}")
    return level


def _optional_int_env(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return _int_env(name, 0, minimum=0)


# Simulation timing and buffer sizes
UPDATE_INTERVAL_MS = _int_env("VITALS_UPDATE_INTERVAL_MS", 2000)
HISTORY_CAPACITY = _int_env("VITALS_HISTORY_CAPACITY", 20)

# Roughly one tick in five takes an abnormal excursion per metric
ABNORMAL_PROBABILITY = _probability_env("VITALS_ABNORMAL_PROBABILITY", 0.2)

# Fixed seed for reproducible demos (unset means fresh entropy)
SEED = _optional_int_env("VITALS_SEED")

# Dashboard server
HOST = os.getenv("VITALS_HOST", "127.0.0.1")
PORT = _int_env("VITALS_PORT", 8050, maximum=65535)
DEBUG = _bool_env("VITALS_DEBUG", False)

LOG_LEVEL = _log_level_env("VITALS_LOG_LEVEL", "INFO")
