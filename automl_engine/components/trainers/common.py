from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional

from automl_engine.contracts.choices import (
    LABEL_COLUMN_PROPERTY,
    RESERVED_PROPERTIES,
    WEIGHT_COLUMN_PROPERTY,
)
from automl_engine.contracts.columns import ColumnInformation
from automl_engine.contracts.pipeline_node import PipelineNode
from automl_engine.contracts.sweep_params import SweepableParam
from automl_engine.core.errors import (
    ConfigurationMismatchError,
    UnknownHyperparameterError,
    UnsupportedColumnRoleError,
)
from automl_engine.settings import load_settings

logger = logging.getLogger(__name__)


def assign_sweep_params(
    declared: Iterable[SweepableParam],
    sweep_params: Any,
    *,
    trainer: str = "trainer",
) -> List[SweepableParam]:
    """Validate an assignment against the declared ranges.

    ``sweep_params`` is either a sequence of SweepableParam (values already
    attached) or a mapping ``name -> value``. Returns the assigned params in
    declaration order; undeclared names, duplicates and out-of-range values
    raise instead of being dropped.
    """
    by_name: Dict[str, SweepableParam] = {p.name: p for p in declared}

    if isinstance(sweep_params, Mapping):
        pairs = list(sweep_params.items())
    else:
        pairs = []
        for p in sweep_params:
            if not isinstance(p, SweepableParam):
                raise ConfigurationMismatchError(
                    f"{trainer}: expected SweepableParam items, got {type(p).__name__}"
                )
            pairs.append((p.name, p.value))

    assigned: Dict[str, SweepableParam] = {}
    for name, value in pairs:
        declared_param = by_name.get(name)
        if declared_param is None:
            raise UnknownHyperparameterError(
                f"{trainer}: unknown hyperparameter {name!r}; declared: {sorted(by_name)}"
            )
        if name in assigned:
            raise ConfigurationMismatchError(f"{trainer}: hyperparameter {name!r} given twice")
        assigned[name] = declared_param.with_value(value)

    return [assigned[n] for n in by_name if n in assigned]


def create_options(
    estimator_cls: type,
    assigned: Iterable[SweepableParam],
    *,
    fixed: Optional[Dict[str, Any]] = None,
    trainer: str = "trainer",
) -> Dict[str, Any]:
    """Constructor kwargs: fixed options overlaid with every assigned sweep value."""
    kw: Dict[str, Any] = dict(fixed or {})
    for p in assigned:
        if p.is_assigned:
            kw[p.name] = p.processed_value()

    allowed = set(inspect.signature(estimator_cls).parameters.keys())
    unexpected = sorted(set(kw) - allowed)
    if unexpected:
        raise ConfigurationMismatchError(
            f"{trainer}: {estimator_cls.__name__} does not accept {unexpected}"
        )
    return kw


def maybe_set_runtime_options(
    estimator_cls: type,
    kw: Dict[str, Any],
    *,
    seed: Optional[int],
    n_jobs: Optional[int],
) -> None:
    params = inspect.signature(estimator_cls).parameters
    if seed is not None and "random_state" in params and "random_state" not in kw:
        kw["random_state"] = int(seed)
    if n_jobs is not None and "n_jobs" in params and "n_jobs" not in kw:
        kw["n_jobs"] = int(n_jobs)


def resolve_weight_column(
    column_info: ColumnInformation,
    *,
    supports_weight: bool,
    trainer: str = "trainer",
) -> Optional[str]:
    """Weight column the trainer consumes, applying the unsupported-weight policy."""
    weight = column_info.example_weight_column
    if weight is None or supports_weight:
        return weight

    if load_settings().weight_policy == "raise":
        raise UnsupportedColumnRoleError(
            f"{trainer} does not support example weights (column {weight!r})"
        )
    logger.warning("%s does not support example weights; ignoring column %r", trainer, weight)
    return None


def build_node_properties(
    assigned: Iterable[SweepableParam],
    label_column: str,
    weight_column: Optional[str] = None,
) -> Dict[str, Any]:
    props: Dict[str, Any] = {p.name: p.processed_value() for p in assigned if p.is_assigned}
    props[LABEL_COLUMN_PROPERTY] = label_column
    if weight_column is not None:
        props[WEIGHT_COLUMN_PROPERTY] = weight_column
    return props


def build_pipeline_node(
    trainer_name: str,
    assigned: Iterable[SweepableParam],
    label_column: str,
    weight_column: Optional[str] = None,
) -> PipelineNode:
    return PipelineNode(
        name=trainer_name,
        node_type="trainer",
        properties=build_node_properties(assigned, label_column, weight_column),
    )


def params_from_node(declared: Iterable[SweepableParam], node: PipelineNode) -> List[SweepableParam]:
    """Turn a node's recorded hyperparameters back into an assignment."""
    values = {k: v for k, v in node.properties.items() if k not in RESERVED_PROPERTIES}
    return assign_sweep_params(declared, values, trainer=node.name)


def column_info_from_node(node: PipelineNode) -> ColumnInformation:
    label = node.label_column
    if not label:
        raise ConfigurationMismatchError(f"{node.name}: node does not record a label column")
    return ColumnInformation(label_column=label, example_weight_column=node.weight_column)
