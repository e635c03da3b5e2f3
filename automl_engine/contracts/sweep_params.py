from __future__ import annotations

"""Sweepable hyperparameter declarations.

A sweepable param is the declared legal range of one trainer setting plus an
optional assigned value. ``value is None`` means "unassigned": the trainer keeps
its library default. Params are immutable; ``with_value`` returns a copy.
"""

import numbers
from typing import Annotated, Any, List, Literal, Optional, Tuple, Union

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, model_validator

from automl_engine.core.errors import HyperparameterValueError

DEFAULT_GRID_STEPS = 10


def _is_real(v: Any) -> bool:
    return isinstance(v, numbers.Real) and not isinstance(v, bool)


def _same_option(a: Any, b: Any) -> bool:
    # True == 1 in Python; keep bool options distinct from numeric ones
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    return a == b


class SweepableParam(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    value: Optional[Any] = None

    @property
    def is_assigned(self) -> bool:
        return self.value is not None

    def check_value(self, value: Any) -> None:  # pragma: no cover - overridden
        raise NotImplementedError

    def coerce(self, value: Any) -> Any:
        return value

    def with_value(self, value: Any) -> "SweepableParam":
        if value is None:
            return self.model_copy(update={"value": None})
        self.check_value(value)
        return self.model_copy(update={"value": self.coerce(value)})

    def processed_value(self) -> Any:
        """Value handed to the trainer constructor."""
        return self.value

    def grid(self) -> List[Any]:  # pragma: no cover - overridden
        raise NotImplementedError


class SweepableDiscreteParam(SweepableParam):
    kind: Literal["discrete"] = "discrete"
    options: Tuple[Any, ...]

    @model_validator(mode="after")
    def _non_empty(self) -> "SweepableDiscreteParam":
        if not self.options:
            raise ValueError(f"{self.name}: discrete param needs at least one option")
        return self

    def check_value(self, value: Any) -> None:
        if not any(_same_option(value, opt) for opt in self.options):
            raise HyperparameterValueError(
                f"{self.name}: {value!r} is not one of {list(self.options)!r}"
            )

    def coerce(self, value: Any) -> Any:
        # Store the declared option so 100.0 reaches the estimator as 100
        return next(opt for opt in self.options if _same_option(value, opt))

    def grid(self) -> List[Any]:
        return list(self.options)


class _RangeParam(SweepableParam):
    is_log: bool = False
    steps_count: Optional[int] = None

    def _bounds(self) -> Tuple[float, float]:
        return float(self.min), float(self.max)  # type: ignore[attr-defined]

    @model_validator(mode="after")
    def _valid_range(self) -> "_RangeParam":
        lo, hi = self._bounds()
        if lo > hi:
            raise ValueError(f"{self.name}: min {lo} is greater than max {hi}")
        if self.is_log and lo <= 0:
            raise ValueError(f"{self.name}: log-scaled range needs a positive min")
        if self.steps_count is not None and self.steps_count < 2:
            raise ValueError(f"{self.name}: steps_count must be at least 2")
        return self

    def _check_bounds(self, value: Any) -> None:
        lo, hi = self._bounds()
        if not (lo <= float(value) <= hi):
            raise HyperparameterValueError(f"{self.name}: {value!r} is outside [{lo}, {hi}]")

    def _spaced(self, n: int) -> np.ndarray:
        lo, hi = self._bounds()
        if self.is_log:
            return np.geomspace(lo, hi, num=n)
        return np.linspace(lo, hi, num=n)


class SweepableFloatParam(_RangeParam):
    kind: Literal["float"] = "float"
    min: float
    max: float

    def check_value(self, value: Any) -> None:
        if not _is_real(value):
            raise HyperparameterValueError(f"{self.name}: expected a number, got {value!r}")
        self._check_bounds(value)

    def coerce(self, value: Any) -> float:
        return float(value)

    def grid(self) -> List[float]:
        n = self.steps_count or DEFAULT_GRID_STEPS
        return [float(v) for v in self._spaced(n)]


class SweepableLongParam(_RangeParam):
    kind: Literal["long"] = "long"
    min: int
    max: int

    def check_value(self, value: Any) -> None:
        integral = isinstance(value, numbers.Integral) or (_is_real(value) and float(value).is_integer())
        if isinstance(value, bool) or not integral:
            raise HyperparameterValueError(f"{self.name}: expected an integer, got {value!r}")
        self._check_bounds(value)

    def coerce(self, value: Any) -> int:
        return int(value)

    def grid(self) -> List[int]:
        span = self.max - self.min + 1
        n = min(self.steps_count or DEFAULT_GRID_STEPS, span)
        vals = np.unique(np.rint(self._spaced(n)).astype(np.int64))
        return [int(v) for v in np.clip(vals, self.min, self.max)]


AnySweepableParam = Annotated[
    Union[SweepableDiscreteParam, SweepableFloatParam, SweepableLongParam],
    Field(discriminator="kind"),
]


__all__ = [
    "SweepableParam",
    "SweepableDiscreteParam",
    "SweepableFloatParam",
    "SweepableLongParam",
    "AnySweepableParam",
]
