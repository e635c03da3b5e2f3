from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from automl_engine.runtime.random.rng import RngManager
from automl_engine.settings import load_settings


class TrainerContext(BaseModel):
    """Handle to the shared library configuration passed to ``create_instance``.

    The seed is a root seed: each trainer gets its own stable child seed so
    that adding a trainer to a sweep never changes another trainer's stream.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    seed: Optional[int] = None
    n_jobs: Optional[int] = None

    @classmethod
    def from_settings(cls) -> "TrainerContext":
        settings = load_settings()
        return cls(seed=settings.seed, n_jobs=settings.n_jobs)

    def rng(self) -> RngManager:
        return RngManager(self.seed)

    def trainer_seed(self, trainer_name: str) -> Optional[int]:
        return self.rng().child_seed(f"trainer/{trainer_name}")
