"""Trainer extensions.

Each extension converts a hyperparameter assignment plus column roles into a
configured sklearn estimator and a serializable PipelineNode. Public API:

    from automl_engine.components.trainers import LbfgsMaximumEntropyMultiExtension, ...
"""

from .base import EstimatorExtension
from .binary import (
    AveragedPerceptronBinaryExtension,
    FastForestBinaryExtension,
    FastTreeBinaryExtension,
    LbfgsLogisticRegressionBinaryExtension,
    LightGbmBinaryExtension,
    LinearSvmBinaryExtension,
    SdcaLogisticRegressionBinaryExtension,
    SgdCalibratedBinaryExtension,
    SymbolicSgdLogisticRegressionBinaryExtension,
)
from .estimator import TrainerEstimator
from .multiclass import (
    AveragedPerceptronOvaExtension,
    FastForestOvaExtension,
    FastTreeOvaExtension,
    LbfgsLogisticRegressionOvaExtension,
    LbfgsMaximumEntropyMultiExtension,
    LightGbmMultiExtension,
    LinearSvmOvaExtension,
    SdcaMaximumEntropyMultiExtension,
    SgdCalibratedOvaExtension,
    SymbolicSgdLogisticRegressionOvaExtension,
)
from .ova import OvaExtension, build_ova_pipeline_node, wrap_one_versus_all
from .regression import (
    FastForestRegressionExtension,
    FastTreeRegressionExtension,
    LbfgsPoissonRegressionExtension,
    LightGbmRegressionExtension,
    OlsRegressionExtension,
    OnlineGradientDescentRegressionExtension,
)

__all__ = [
    "EstimatorExtension",
    "OvaExtension",
    "TrainerEstimator",
    "build_ova_pipeline_node",
    "wrap_one_versus_all",
    "AveragedPerceptronBinaryExtension",
    "FastForestBinaryExtension",
    "FastTreeBinaryExtension",
    "LightGbmBinaryExtension",
    "LinearSvmBinaryExtension",
    "LbfgsLogisticRegressionBinaryExtension",
    "SdcaLogisticRegressionBinaryExtension",
    "SgdCalibratedBinaryExtension",
    "SymbolicSgdLogisticRegressionBinaryExtension",
    "AveragedPerceptronOvaExtension",
    "FastForestOvaExtension",
    "FastTreeOvaExtension",
    "LinearSvmOvaExtension",
    "LbfgsLogisticRegressionOvaExtension",
    "SgdCalibratedOvaExtension",
    "SymbolicSgdLogisticRegressionOvaExtension",
    "LightGbmMultiExtension",
    "SdcaMaximumEntropyMultiExtension",
    "LbfgsMaximumEntropyMultiExtension",
    "FastForestRegressionExtension",
    "FastTreeRegressionExtension",
    "LightGbmRegressionExtension",
    "OnlineGradientDescentRegressionExtension",
    "OlsRegressionExtension",
    "LbfgsPoissonRegressionExtension",
]
