from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, ClassVar, List, Optional

from sklearn.multiclass import OneVsRestClassifier

from automl_engine.components.interfaces import SweepAssignment, TrainerExtension
from automl_engine.contracts.choices import (
    BINARY_TRAINER_PROPERTY,
    LABEL_COLUMN_PROPERTY,
    OVA_NODE_NAME,
)
from automl_engine.contracts.columns import ColumnInformation
from automl_engine.contracts.context import TrainerContext
from automl_engine.contracts.pipeline_node import PipelineNode
from automl_engine.contracts.sweep_params import SweepableParam
from automl_engine.core.errors import UnexpectedTrainerTypeError
from automl_engine.registries.trainers import get_trainer_name

from .estimator import TrainerEstimator

logger = logging.getLogger(__name__)


def wrap_one_versus_all(
    binary_trainer: Any,
    expected_type: type,
    column_info: ColumnInformation,
    *,
    name: str = OVA_NODE_NAME,
    n_jobs: Optional[int] = None,
) -> TrainerEstimator:
    """Wrap a binary trainer in a one-versus-all multiclass composite.

    The binary trainer must carry an estimator of ``expected_type``; anything
    else is rejected here rather than failing later inside ``fit``.
    """
    inner = getattr(binary_trainer, "estimator", None)
    if not isinstance(binary_trainer, TrainerEstimator) or not isinstance(inner, expected_type):
        got = type(inner if inner is not None else binary_trainer).__name__
        raise UnexpectedTrainerTypeError(
            f"{name}: expected a {expected_type.__name__} binary trainer, got {got}"
        )

    logger.debug("%s: wrapping %s one-versus-all (weight=%s)", name, binary_trainer.name, binary_trainer.weight_column)
    return TrainerEstimator(
        name=name,
        estimator=OneVsRestClassifier(inner, n_jobs=n_jobs),
        column_info=column_info,
        weight_column=binary_trainer.weight_column,
    )


def build_ova_pipeline_node(
    binary: TrainerExtension,
    sweep_params: SweepAssignment,
    column_info: ColumnInformation,
) -> PipelineNode:
    binary_node = binary.create_pipeline_node(sweep_params, column_info)
    return PipelineNode(
        name=OVA_NODE_NAME,
        node_type="trainer",
        properties={
            LABEL_COLUMN_PROPERTY: column_info.label_column,
            BINARY_TRAINER_PROPERTY: binary_node,
        },
    )


@dataclass(frozen=True)
class OvaExtension:
    """Multiclass extension composed from a binary extension.

    ``binary`` is created once per instance and never reassigned; sweep ranges,
    estimator construction and node building all delegate to it.
    """

    binary: TrainerExtension
    expected_type: ClassVar[type]

    def get_hyperparam_sweep_ranges(self) -> List[SweepableParam]:
        return self.binary.get_hyperparam_sweep_ranges()

    def create_instance(
        self,
        context: TrainerContext,
        sweep_params: SweepAssignment,
        column_info: ColumnInformation,
    ) -> TrainerEstimator:
        binary_trainer = self.binary.create_instance(context, sweep_params, column_info)
        return wrap_one_versus_all(
            binary_trainer,
            self.expected_type,
            column_info,
            name=get_trainer_name(self),
            n_jobs=context.n_jobs,
        )

    def create_pipeline_node(
        self,
        sweep_params: SweepAssignment,
        column_info: ColumnInformation,
    ) -> PipelineNode:
        return build_ova_pipeline_node(self.binary, sweep_params, column_info)
