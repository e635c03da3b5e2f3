from __future__ import annotations

import logging
from typing import Any, List, Optional

from automl_engine.components.interfaces import TrainerExtension
from automl_engine.components.trainers.common import column_info_from_node, params_from_node
from automl_engine.components.trainers.estimator import TrainerEstimator
from automl_engine.components.trainers.ova import OvaExtension
from automl_engine.contracts.choices import OVA_NODE_NAME
from automl_engine.contracts.columns import ColumnInformation
from automl_engine.contracts.context import TrainerContext
from automl_engine.contracts.pipeline_node import PipelineNode
from automl_engine.contracts.sweep_params import SweepableParam
from automl_engine.core.errors import ConfigurationMismatchError, UnknownTrainerError
from automl_engine.registries.trainers import (
    find_trainer_name,
    get_trainer_extension,
    get_trainers,
)

logger = logging.getLogger(__name__)


def make_trainer(
    name: str,
    sweep_params: Any,
    column_info: ColumnInformation,
    *,
    context: Optional[TrainerContext] = None,
) -> TrainerEstimator:
    """Build the estimator for a registered trainer name."""
    ctx = context if context is not None else TrainerContext.from_settings()
    return get_trainer_extension(name).create_instance(ctx, sweep_params, column_info)


def make_pipeline_node(name: str, sweep_params: Any, column_info: ColumnInformation) -> PipelineNode:
    return get_trainer_extension(name).create_pipeline_node(sweep_params, column_info)


def _ova_extension_for(binary_name: str) -> OvaExtension:
    for ext in get_trainers("multiclass"):
        if isinstance(ext, OvaExtension) and find_trainer_name(ext.binary) == binary_name:
            return ext
    raise UnknownTrainerError(f"No one-versus-all trainer wraps {binary_name!r}")


def _resolve(node: PipelineNode) -> tuple[TrainerExtension, PipelineNode]:
    """Extension to rebuild ``node`` with, and the node holding its hyperparameters."""
    if node.name != OVA_NODE_NAME:
        return get_trainer_extension(node.name), node

    inner = node.binary_trainer
    if inner is None:
        raise ConfigurationMismatchError(f"{OVA_NODE_NAME} node does not record a binary trainer")
    return _ova_extension_for(inner.name), inner


def make_trainer_from_node(
    node: PipelineNode,
    *,
    context: Optional[TrainerContext] = None,
) -> TrainerEstimator:
    """Rebuild the estimator a PipelineNode describes.

    The result matches what ``create_instance`` returns for the same
    hyperparameters and columns (same estimator type and parameters).
    """
    ext, params_node = _resolve(node)
    assigned: List[SweepableParam] = params_from_node(ext.get_hyperparam_sweep_ranges(), params_node)
    column_info = column_info_from_node(params_node)

    logger.debug("rebuilding %s from pipeline node %s", type(ext).__name__, node.name)
    ctx = context if context is not None else TrainerContext.from_settings()
    return ext.create_instance(ctx, assigned, column_info)

