"""
Runtime settings for the simulation driver.

Values come from the environment (a local ``.env`` is loaded first) and fall
back to the constants below.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_WIDTH = 8
DEFAULT_FPS = 0  # 0 runs ticks back to back
DEFAULT_MAX_TICKS = 500
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class SimulationSettings:
    width: int = DEFAULT_WIDTH
    spawn_index: Optional[int] = None
    seed: Optional[int] = None
    fps: float = DEFAULT_FPS
    max_ticks: int = DEFAULT_MAX_TICKS
    log_level: str = DEFAULT_LOG_LEVEL


def _int_from_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _float_from_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def load_settings(dotenv: bool = True) -> SimulationSettings:
    """
    Build settings from SNAKE_* environment variables.

    Args:
        dotenv: Load a ``.env`` file into the environment first

    Returns:
        A SimulationSettings instance
    """
    if dotenv:
        load_dotenv()

    return SimulationSettings(
        width=_int_from_env("SNAKE_WIDTH", DEFAULT_WIDTH),
        spawn_index=_int_from_env("SNAKE_SPAWN", None),
        seed=_int_from_env("SNAKE_SEED", None),
        fps=_float_from_env("SNAKE_FPS", DEFAULT_FPS),
        max_ticks=_int_from_env("SNAKE_MAX_TICKS", DEFAULT_MAX_TICKS),
        log_level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
    )
