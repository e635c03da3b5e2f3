from __future__ import annotations

"""Per-family hyperparameter sweep ranges.

Every param name is the sklearn constructor keyword it lands on, so building
an estimator is a straight copy of the assigned values. Builders return fresh
lists on each call; the params themselves are immutable.
"""

from typing import List

from automl_engine.contracts.sweep_params import (
    SweepableDiscreteParam,
    SweepableFloatParam,
    SweepableLongParam,
    SweepableParam,
)


def _tree_shape_params() -> List[SweepableParam]:
    return [
        SweepableLongParam(name="max_leaf_nodes", min=2, max=128, is_log=True, steps_count=4),
        SweepableDiscreteParam(name="min_samples_leaf", options=(1, 10, 50)),
    ]


def build_averaged_perceptron_params() -> List[SweepableParam]:
    return [
        SweepableDiscreteParam(name="eta0", options=(0.01, 0.1, 0.5, 1.0)),
        SweepableFloatParam(name="alpha", min=1e-6, max=0.4, is_log=True, steps_count=5),
        SweepableLongParam(name="max_iter", min=1, max=100, is_log=True, steps_count=5),
    ]


def build_fast_forest_params() -> List[SweepableParam]:
    return [
        SweepableLongParam(name="n_estimators", min=20, max=500, is_log=True, steps_count=5),
        *_tree_shape_params(),
        SweepableDiscreteParam(name="max_features", options=("sqrt", "log2", 1.0)),
    ]


def build_fast_tree_params() -> List[SweepableParam]:
    return [
        SweepableLongParam(name="n_estimators", min=20, max=500, is_log=True, steps_count=5),
        SweepableFloatParam(name="learning_rate", min=0.025, max=0.4, is_log=True),
        *_tree_shape_params(),
        SweepableDiscreteParam(name="subsample", options=(0.5, 0.8, 1.0)),
    ]


def build_light_gbm_params() -> List[SweepableParam]:
    return [
        SweepableLongParam(name="max_iter", min=20, max=500, is_log=True, steps_count=5),
        SweepableFloatParam(name="learning_rate", min=0.025, max=0.4, is_log=True),
        SweepableLongParam(name="max_leaf_nodes", min=2, max=128, is_log=True, steps_count=4),
        SweepableDiscreteParam(name="min_samples_leaf", options=(1, 10, 20, 50)),
        SweepableDiscreteParam(name="l2_regularization", options=(0.0, 0.5, 1.0)),
    ]


def build_light_gbm_params_multiclass() -> List[SweepableParam]:
    # Multiclass adds class rebalancing on top of the shared boosting ranges.
    return [
        *build_light_gbm_params(),
        SweepableDiscreteParam(name="class_weight", options=(None, "balanced")),
    ]


def build_linear_svm_params() -> List[SweepableParam]:
    return [
        SweepableFloatParam(name="C", min=1e-3, max=10.0, is_log=True),
        SweepableDiscreteParam(name="fit_intercept", options=(True, False)),
        SweepableLongParam(name="max_iter", min=100, max=5000, is_log=True, steps_count=4),
    ]


def build_lbfgs_logistic_regression_params() -> List[SweepableParam]:
    return [
        SweepableFloatParam(name="C", min=1e-3, max=1e3, is_log=True),
        SweepableDiscreteParam(name="tol", options=(1e-4, 1e-7)),
        SweepableDiscreteParam(name="max_iter", options=(100, 500, 1000)),
    ]


def build_sdca_params() -> List[SweepableParam]:
    return [
        SweepableFloatParam(name="C", min=1e-3, max=1e3, is_log=True),
        SweepableDiscreteParam(name="tol", options=(1e-2, 1e-3, 1e-4)),
        SweepableDiscreteParam(name="max_iter", options=(100, 500, 1000)),
    ]


def build_sgd_params() -> List[SweepableParam]:
    return [
        SweepableFloatParam(name="alpha", min=1e-7, max=1e-1, is_log=True),
        SweepableDiscreteParam(name="tol", options=(1e-3, 1e-4, 1e-5)),
        SweepableLongParam(name="max_iter", min=5, max=200, is_log=True, steps_count=5),
        SweepableDiscreteParam(name="shuffle", options=(True, False)),
    ]


def build_symbolic_sgd_params() -> List[SweepableParam]:
    return [
        SweepableDiscreteParam(name="eta0", options=(0.001, 0.01, 0.1, 0.5)),
        SweepableLongParam(name="max_iter", min=1, max=100, is_log=True, steps_count=5),
        SweepableDiscreteParam(name="average", options=(False, True)),
    ]


def build_online_gradient_descent_params() -> List[SweepableParam]:
    return [
        SweepableDiscreteParam(name="eta0", options=(0.001, 0.01, 0.05, 0.1)),
        SweepableDiscreteParam(name="learning_rate", options=("constant", "invscaling")),
        SweepableFloatParam(name="alpha", min=1e-6, max=0.4, is_log=True, steps_count=5),
        SweepableLongParam(name="max_iter", min=1, max=100, is_log=True, steps_count=5),
    ]


def build_ols_params() -> List[SweepableParam]:
    return [
        SweepableDiscreteParam(name="fit_intercept", options=(True, False)),
        SweepableDiscreteParam(name="positive", options=(False, True)),
    ]


def build_poisson_regression_params() -> List[SweepableParam]:
    return [
        SweepableFloatParam(name="alpha", min=1e-4, max=10.0, is_log=True),
        SweepableDiscreteParam(name="tol", options=(1e-4, 1e-7)),
        SweepableDiscreteParam(name="max_iter", options=(100, 500, 1000)),
    ]
