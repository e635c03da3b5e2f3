from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Dict, List

from automl_engine.components.interfaces import SweepAssignment
from automl_engine.contracts.columns import ColumnInformation
from automl_engine.contracts.context import TrainerContext
from automl_engine.contracts.pipeline_node import PipelineNode
from automl_engine.contracts.sweep_params import SweepableParam
from automl_engine.registries.trainers import get_trainer_name

from .common import (
    assign_sweep_params,
    build_pipeline_node,
    create_options,
    maybe_set_runtime_options,
    resolve_weight_column,
)
from .estimator import TrainerEstimator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EstimatorExtension:
    """Extension that builds its sklearn estimator directly.

    Subclasses pin the estimator class, the builder of their sweep ranges, the
    options that are never swept and whether the algorithm consumes
    per-example weights.
    """

    estimator_cls: ClassVar[type]
    sweep_ranges: ClassVar[Callable[[], List[SweepableParam]]]
    fixed_options: ClassVar[Dict[str, Any]] = {}
    supports_weight: ClassVar[bool] = False

    def get_hyperparam_sweep_ranges(self) -> List[SweepableParam]:
        return type(self).sweep_ranges()

    def _assign(self, sweep_params: SweepAssignment, name: str) -> List[SweepableParam]:
        return assign_sweep_params(self.get_hyperparam_sweep_ranges(), sweep_params, trainer=name)

    def create_instance(
        self,
        context: TrainerContext,
        sweep_params: SweepAssignment,
        column_info: ColumnInformation,
    ) -> TrainerEstimator:
        name = get_trainer_name(self)
        assigned = self._assign(sweep_params, name)

        kw = create_options(self.estimator_cls, assigned, fixed=self.fixed_options, trainer=name)
        maybe_set_runtime_options(
            self.estimator_cls,
            kw,
            seed=context.trainer_seed(name),
            n_jobs=context.n_jobs,
        )
        weight = resolve_weight_column(column_info, supports_weight=self.supports_weight, trainer=name)

        logger.debug("building %s as %s(%s)", name, self.estimator_cls.__name__, kw)
        return TrainerEstimator(
            name=name,
            estimator=self.estimator_cls(**kw),
            column_info=column_info,
            weight_column=weight,
        )

    def create_pipeline_node(
        self,
        sweep_params: SweepAssignment,
        column_info: ColumnInformation,
    ) -> PipelineNode:
        name = get_trainer_name(self)
        assigned = self._assign(sweep_params, name)
        weight = resolve_weight_column(column_info, supports_weight=self.supports_weight, trainer=name)
        return build_pipeline_node(name, assigned, column_info.label_column, weight)
