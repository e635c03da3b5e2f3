"""Built-in trainer extension registrations.

This module is imported for side-effects by :mod:`automl_engine.registries.trainers`.

To add a trainer:
    1) create the extension class under automl_engine.components.trainers
    2) register it here via _register
"""

from __future__ import annotations

from typing import Any, Type

from automl_engine.components.trainers import (
    AveragedPerceptronBinaryExtension,
    AveragedPerceptronOvaExtension,
    FastForestBinaryExtension,
    FastForestOvaExtension,
    FastForestRegressionExtension,
    FastTreeBinaryExtension,
    FastTreeOvaExtension,
    FastTreeRegressionExtension,
    LbfgsLogisticRegressionBinaryExtension,
    LbfgsLogisticRegressionOvaExtension,
    LbfgsMaximumEntropyMultiExtension,
    LbfgsPoissonRegressionExtension,
    LightGbmBinaryExtension,
    LightGbmMultiExtension,
    LightGbmRegressionExtension,
    LinearSvmBinaryExtension,
    LinearSvmOvaExtension,
    OlsRegressionExtension,
    OnlineGradientDescentRegressionExtension,
    SdcaLogisticRegressionBinaryExtension,
    SdcaMaximumEntropyMultiExtension,
    SgdCalibratedBinaryExtension,
    SgdCalibratedOvaExtension,
    SymbolicSgdLogisticRegressionBinaryExtension,
    SymbolicSgdLogisticRegressionOvaExtension,
)
from automl_engine.contracts.choices import TaskKind
from automl_engine.registries.trainers import register_trainer_extension


def _register(name: str, cls: Type[Any], task: TaskKind) -> None:
    register_trainer_extension(name, task=task)(cls)


# ---------------- binary ----------------
_register("AveragedPerceptronBinary", AveragedPerceptronBinaryExtension, "binary")
_register("FastForestBinary", FastForestBinaryExtension, "binary")
_register("FastTreeBinary", FastTreeBinaryExtension, "binary")
_register("LightGbmBinary", LightGbmBinaryExtension, "binary")
_register("LinearSvmBinary", LinearSvmBinaryExtension, "binary")
_register("LbfgsLogisticRegressionBinary", LbfgsLogisticRegressionBinaryExtension, "binary")
_register("SdcaLogisticRegressionBinary", SdcaLogisticRegressionBinaryExtension, "binary")
_register("SgdCalibratedBinary", SgdCalibratedBinaryExtension, "binary")
_register("SymbolicSgdLogisticRegressionBinary", SymbolicSgdLogisticRegressionBinaryExtension, "binary")

# ---------------- multiclass ----------------
_register("AveragedPerceptronOva", AveragedPerceptronOvaExtension, "multiclass")
_register("FastForestOva", FastForestOvaExtension, "multiclass")
_register("FastTreeOva", FastTreeOvaExtension, "multiclass")
_register("LightGbmMulti", LightGbmMultiExtension, "multiclass")
_register("LinearSvmOva", LinearSvmOvaExtension, "multiclass")
_register("LbfgsLogisticRegressionOva", LbfgsLogisticRegressionOvaExtension, "multiclass")
_register("LbfgsMaximumEntropyMulti", LbfgsMaximumEntropyMultiExtension, "multiclass")
_register("SdcaMaximumEntropyMulti", SdcaMaximumEntropyMultiExtension, "multiclass")
_register("SgdCalibratedOva", SgdCalibratedOvaExtension, "multiclass")
_register("SymbolicSgdLogisticRegressionOva", SymbolicSgdLogisticRegressionOvaExtension, "multiclass")

# ---------------- regression ----------------
_register("FastForestRegression", FastForestRegressionExtension, "regression")
_register("FastTreeRegression", FastTreeRegressionExtension, "regression")
_register("LightGbmRegression", LightGbmRegressionExtension, "regression")
_register("OnlineGradientDescentRegression", OnlineGradientDescentRegressionExtension, "regression")
_register("OlsRegression", OlsRegressionExtension, "regression")
_register("LbfgsPoissonRegression", LbfgsPoissonRegressionExtension, "regression")
