"""Environment-driven configuration for the trainer catalog."""

from __future__ import annotations

import os
from typing import Literal, Optional

from pydantic import BaseModel

WeightPolicy = Literal["ignore", "raise"]


def _optional_int(raw: Optional[str]) -> Optional[int]:
    if raw is None or not raw.strip():
        return None
    return int(raw)


def get_log_level() -> str:
    """Log level for the package logger (default WARNING)."""
    return os.getenv("AUTOML_LOG_LEVEL", "WARNING").upper()


def get_weight_policy() -> str:
    """What to do when a weight column is given to a trainer without weight support."""
    return os.getenv("AUTOML_UNSUPPORTED_WEIGHT_POLICY", "ignore").strip().lower()


def get_default_seed() -> Optional[int]:
    return _optional_int(os.getenv("AUTOML_SEED"))


def get_default_n_jobs() -> Optional[int]:
    return _optional_int(os.getenv("AUTOML_N_JOBS"))


class EngineSettings(BaseModel):
    log_level: str = "WARNING"
    weight_policy: WeightPolicy = "ignore"
    seed: Optional[int] = None
    n_jobs: Optional[int] = None


def load_settings() -> EngineSettings:
    """Read settings from the environment.

    Not cached: tests (and long-lived hosts) may change the environment between
    calls, and reading a handful of variables is cheap.
    """
    return EngineSettings(
        log_level=get_log_level(),
        weight_policy=get_weight_policy(),
        seed=get_default_seed(),
        n_jobs=get_default_n_jobs(),
    )
