from __future__ import annotations

from dataclasses import dataclass

from sklearn.ensemble import (
    GradientBoostingClassifier,
    HistGradientBoostingClassifier,
    RandomForestClassifier,
)
from sklearn.linear_model import LogisticRegression, SGDClassifier
from sklearn.svm import LinearSVC

from .base import EstimatorExtension
from .sweep_ranges import (
    build_averaged_perceptron_params,
    build_fast_forest_params,
    build_fast_tree_params,
    build_lbfgs_logistic_regression_params,
    build_light_gbm_params,
    build_linear_svm_params,
    build_sdca_params,
    build_sgd_params,
    build_symbolic_sgd_params,
)


@dataclass(frozen=True)
class AveragedPerceptronBinaryExtension(EstimatorExtension):
    estimator_cls = SGDClassifier
    fixed_options = {
        "loss": "perceptron",
        "penalty": "l2",
        "learning_rate": "constant",
        "eta0": 1.0,
        "average": True,
    }
    sweep_ranges = build_averaged_perceptron_params


@dataclass(frozen=True)
class FastForestBinaryExtension(EstimatorExtension):
    estimator_cls = RandomForestClassifier
    supports_weight = True
    sweep_ranges = build_fast_forest_params


@dataclass(frozen=True)
class FastTreeBinaryExtension(EstimatorExtension):
    estimator_cls = GradientBoostingClassifier
    supports_weight = True
    sweep_ranges = build_fast_tree_params


@dataclass(frozen=True)
class LightGbmBinaryExtension(EstimatorExtension):
    estimator_cls = HistGradientBoostingClassifier
    supports_weight = True
    sweep_ranges = build_light_gbm_params


@dataclass(frozen=True)
class LinearSvmBinaryExtension(EstimatorExtension):
    estimator_cls = LinearSVC
    sweep_ranges = build_linear_svm_params


@dataclass(frozen=True)
class LbfgsLogisticRegressionBinaryExtension(EstimatorExtension):
    estimator_cls = LogisticRegression
    fixed_options = {"solver": "lbfgs"}
    supports_weight = True
    sweep_ranges = build_lbfgs_logistic_regression_params


@dataclass(frozen=True)
class SdcaLogisticRegressionBinaryExtension(EstimatorExtension):
    estimator_cls = LogisticRegression
    fixed_options = {"solver": "saga"}
    supports_weight = True
    sweep_ranges = build_sdca_params


@dataclass(frozen=True)
class SgdCalibratedBinaryExtension(EstimatorExtension):
    # log_loss is what exposes predict_proba on SGDClassifier
    estimator_cls = SGDClassifier
    fixed_options = {"loss": "log_loss"}
    supports_weight = True
    sweep_ranges = build_sgd_params


@dataclass(frozen=True)
class SymbolicSgdLogisticRegressionBinaryExtension(EstimatorExtension):
    estimator_cls = SGDClassifier
    fixed_options = {"loss": "log_loss", "learning_rate": "constant", "eta0": 0.1}
    sweep_ranges = build_symbolic_sgd_params


__all__ = [
    "AveragedPerceptronBinaryExtension",
    "FastForestBinaryExtension",
    "FastTreeBinaryExtension",
    "LightGbmBinaryExtension",
    "LinearSvmBinaryExtension",
    "LbfgsLogisticRegressionBinaryExtension",
    "SdcaLogisticRegressionBinaryExtension",
    "SgdCalibratedBinaryExtension",
    "SymbolicSgdLogisticRegressionBinaryExtension",
]
