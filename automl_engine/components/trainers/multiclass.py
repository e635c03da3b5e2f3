from __future__ import annotations

from dataclasses import dataclass, field

from sklearn.ensemble import (
    GradientBoostingClassifier,
    HistGradientBoostingClassifier,
    RandomForestClassifier,
)
from sklearn.linear_model import LogisticRegression, SGDClassifier
from sklearn.svm import LinearSVC

from automl_engine.components.interfaces import TrainerExtension

from .base import EstimatorExtension
from .binary import (
    AveragedPerceptronBinaryExtension,
    FastForestBinaryExtension,
    FastTreeBinaryExtension,
    LbfgsLogisticRegressionBinaryExtension,
    LinearSvmBinaryExtension,
    SgdCalibratedBinaryExtension,
    SymbolicSgdLogisticRegressionBinaryExtension,
)
from .ova import OvaExtension
from .sweep_ranges import (
    build_lbfgs_logistic_regression_params,
    build_light_gbm_params_multiclass,
    build_sdca_params,
)

# ---------------- one-versus-all ----------------


@dataclass(frozen=True)
class AveragedPerceptronOvaExtension(OvaExtension):
    binary: TrainerExtension = field(default_factory=AveragedPerceptronBinaryExtension)
    expected_type = SGDClassifier


@dataclass(frozen=True)
class FastForestOvaExtension(OvaExtension):
    binary: TrainerExtension = field(default_factory=FastForestBinaryExtension)
    expected_type = RandomForestClassifier


@dataclass(frozen=True)
class FastTreeOvaExtension(OvaExtension):
    binary: TrainerExtension = field(default_factory=FastTreeBinaryExtension)
    expected_type = GradientBoostingClassifier


@dataclass(frozen=True)
class LinearSvmOvaExtension(OvaExtension):
    binary: TrainerExtension = field(default_factory=LinearSvmBinaryExtension)
    expected_type = LinearSVC


@dataclass(frozen=True)
class LbfgsLogisticRegressionOvaExtension(OvaExtension):
    binary: TrainerExtension = field(default_factory=LbfgsLogisticRegressionBinaryExtension)
    expected_type = LogisticRegression


@dataclass(frozen=True)
class SgdCalibratedOvaExtension(OvaExtension):
    binary: TrainerExtension = field(default_factory=SgdCalibratedBinaryExtension)
    expected_type = SGDClassifier


@dataclass(frozen=True)
class SymbolicSgdLogisticRegressionOvaExtension(OvaExtension):
    binary: TrainerExtension = field(default_factory=SymbolicSgdLogisticRegressionBinaryExtension)
    expected_type = SGDClassifier


# ---------------- native multiclass ----------------


@dataclass(frozen=True)
class LightGbmMultiExtension(EstimatorExtension):
    estimator_cls = HistGradientBoostingClassifier
    supports_weight = True
    sweep_ranges = build_light_gbm_params_multiclass


@dataclass(frozen=True)
class SdcaMaximumEntropyMultiExtension(EstimatorExtension):
    estimator_cls = LogisticRegression
    fixed_options = {"solver": "saga"}
    sweep_ranges = build_sdca_params


@dataclass(frozen=True)
class LbfgsMaximumEntropyMultiExtension(EstimatorExtension):
    estimator_cls = LogisticRegression
    fixed_options = {"solver": "lbfgs"}
    supports_weight = True
    sweep_ranges = build_lbfgs_logistic_regression_params


__all__ = [
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
]
