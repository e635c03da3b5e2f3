"""Typed contracts for the trainer catalog.

Contracts only depend on stdlib + pydantic (+ numpy for range enumeration).
"""

from .choices import (
    OVA_NODE_NAME,
    BinaryTrainerName,
    MulticlassTrainerName,
    RegressionTrainerName,
    TaskKind,
    trainer_names,
)
from .columns import ColumnInformation
from .context import TrainerContext
from .pipeline_node import PipelineNode
from .sweep_params import (
    AnySweepableParam,
    SweepableDiscreteParam,
    SweepableFloatParam,
    SweepableLongParam,
    SweepableParam,
)

__all__ = [
    "OVA_NODE_NAME",
    "BinaryTrainerName",
    "MulticlassTrainerName",
    "RegressionTrainerName",
    "TaskKind",
    "trainer_names",
    "ColumnInformation",
    "TrainerContext",
    "PipelineNode",
    "AnySweepableParam",
    "SweepableParam",
    "SweepableDiscreteParam",
    "SweepableFloatParam",
    "SweepableLongParam",
]
