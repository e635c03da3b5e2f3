from __future__ import annotations

from dataclasses import dataclass

from sklearn.ensemble import (
    GradientBoostingRegressor,
    HistGradientBoostingRegressor,
    RandomForestRegressor,
)
from sklearn.linear_model import LinearRegression, PoissonRegressor, SGDRegressor

from .base import EstimatorExtension
from .sweep_ranges import (
    build_fast_forest_params,
    build_fast_tree_params,
    build_light_gbm_params,
    build_ols_params,
    build_online_gradient_descent_params,
    build_poisson_regression_params,
)


@dataclass(frozen=True)
class FastForestRegressionExtension(EstimatorExtension):
    estimator_cls = RandomForestRegressor
    supports_weight = True
    sweep_ranges = build_fast_forest_params


@dataclass(frozen=True)
class FastTreeRegressionExtension(EstimatorExtension):
    estimator_cls = GradientBoostingRegressor
    supports_weight = True
    sweep_ranges = build_fast_tree_params


@dataclass(frozen=True)
class LightGbmRegressionExtension(EstimatorExtension):
    estimator_cls = HistGradientBoostingRegressor
    supports_weight = True
    sweep_ranges = build_light_gbm_params


@dataclass(frozen=True)
class OnlineGradientDescentRegressionExtension(EstimatorExtension):
    estimator_cls = SGDRegressor
    fixed_options = {"loss": "squared_error", "penalty": "l2"}
    sweep_ranges = build_online_gradient_descent_params


@dataclass(frozen=True)
class OlsRegressionExtension(EstimatorExtension):
    estimator_cls = LinearRegression
    supports_weight = True
    sweep_ranges = build_ols_params


@dataclass(frozen=True)
class LbfgsPoissonRegressionExtension(EstimatorExtension):
    estimator_cls = PoissonRegressor
    fixed_options = {"solver": "lbfgs"}
    supports_weight = True
    sweep_ranges = build_poisson_regression_params


__all__ = [
    "FastForestRegressionExtension",
    "FastTreeRegressionExtension",
    "LightGbmRegressionExtension",
    "OnlineGradientDescentRegressionExtension",
    "OlsRegressionExtension",
    "LbfgsPoissonRegressionExtension",
]
