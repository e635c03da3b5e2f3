from __future__ import annotations

from typing import Any, List, Mapping, Protocol, Sequence, Union, runtime_checkable

from automl_engine.contracts.columns import ColumnInformation
from automl_engine.contracts.context import TrainerContext
from automl_engine.contracts.pipeline_node import PipelineNode
from automl_engine.contracts.sweep_params import SweepableParam

# Assigned hyperparameters: declared params carrying values, or name -> value.
SweepAssignment = Union[Sequence[SweepableParam], Mapping[str, Any]]


@runtime_checkable
class TrainerExtension(Protocol):
    """Uniform registration surface for one trainer family.

    Implementations are stateless; the only thing an implementation may hold is
    the binary extension it wraps (one-versus-all variants).
    """

    def get_hyperparam_sweep_ranges(self) -> List[SweepableParam]:
        """Declared tunable params; same sequence on every call."""
        ...

    def create_instance(
        self,
        context: TrainerContext,
        sweep_params: SweepAssignment,
        column_info: ColumnInformation,
    ) -> Any:
        """Return a configured, unfitted TrainerEstimator."""
        ...

    def create_pipeline_node(
        self,
        sweep_params: SweepAssignment,
        column_info: ColumnInformation,
    ) -> PipelineNode:
        """Describe the configured step without building the estimator."""
        ...
