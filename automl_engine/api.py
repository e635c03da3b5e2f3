"""Public API.

This module is the **stable public surface** of the trainer catalog:

    from automl_engine.api import get_trainers, make_trainer_from_node

The underlying implementations live under :mod:`automl_engine.components`,
:mod:`automl_engine.registries` and :mod:`automl_engine.factories`.
"""

from __future__ import annotations

from automl_engine.components.interfaces import TrainerExtension
from automl_engine.components.trainers.estimator import TrainerEstimator
from automl_engine.contracts import (
    ColumnInformation,
    PipelineNode,
    SweepableDiscreteParam,
    SweepableFloatParam,
    SweepableLongParam,
    SweepableParam,
    TrainerContext,
)
from automl_engine.core.errors import (
    ConfigurationMismatchError,
    HyperparameterValueError,
    TrainerExtensionError,
    UnexpectedTrainerTypeError,
    UnknownHyperparameterError,
    UnknownTrainerError,
    UnsupportedColumnRoleError,
)
from automl_engine.core.logging import configure_logging
from automl_engine.factories.trainer_factory import (
    make_pipeline_node,
    make_trainer,
    make_trainer_from_node,
)
from automl_engine.registries import (
    get_task,
    get_trainer_extension,
    get_trainer_name,
    get_trainers,
    list_trainer_names,
    register_trainer_extension,
)
from automl_engine.settings import EngineSettings, load_settings

__all__ = [
    "TrainerExtension",
    "TrainerEstimator",
    "ColumnInformation",
    "PipelineNode",
    "SweepableParam",
    "SweepableDiscreteParam",
    "SweepableFloatParam",
    "SweepableLongParam",
    "TrainerContext",
    "TrainerExtensionError",
    "ConfigurationMismatchError",
    "UnknownHyperparameterError",
    "HyperparameterValueError",
    "UnexpectedTrainerTypeError",
    "UnsupportedColumnRoleError",
    "UnknownTrainerError",
    "configure_logging",
    "make_trainer",
    "make_pipeline_node",
    "make_trainer_from_node",
    "get_task",
    "get_trainer_extension",
    "get_trainer_name",
    "get_trainers",
    "list_trainer_names",
    "register_trainer_extension",
    "EngineSettings",
    "load_settings",
]
