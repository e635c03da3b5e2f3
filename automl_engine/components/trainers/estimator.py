from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import numpy as np
import pandas as pd
from sklearn import config_context
from sklearn.base import BaseEstimator

from automl_engine.contracts.columns import ColumnInformation
from automl_engine.types.sklearn import SkEstimator, SkOneVsRest

logger = logging.getLogger(__name__)


@dataclass
class TrainerEstimator:
    """An unfitted sklearn estimator bound to the columns it trains on.

    This is what ``create_instance`` hands back: the estimator carries the
    hyperparameters, the wrapper carries the column roles (label, optional
    example weight, features).
    """

    name: str
    estimator: SkEstimator
    column_info: ColumnInformation
    weight_column: Optional[str] = None

    @property
    def label_column(self) -> str:
        return self.column_info.label_column

    def get_params(self) -> Dict[str, Any]:
        """Flattened estimator params.

        Nested estimators only show up through their ``estimator__*`` keys, so two
        independently built trainers with the same configuration compare equal.
        """
        params = self.estimator.get_params(deep=True)
        return {k: v for k, v in params.items() if not isinstance(v, BaseEstimator)}

    def _features(self, frame: pd.DataFrame) -> np.ndarray:
        cols = self.column_info.resolve_feature_columns(frame.columns)
        return frame[cols].to_numpy()

    def fit(self, frame: pd.DataFrame) -> "TrainerEstimator":
        X = self._features(frame)
        y = frame[self.label_column].to_numpy()

        fit_kwargs: Dict[str, Any] = {}
        if self.weight_column is not None:
            fit_kwargs["sample_weight"] = frame[self.weight_column].to_numpy(dtype=float)

        logger.debug(
            "fitting %s on %d rows x %d features (weighted=%s)",
            self.name,
            X.shape[0],
            X.shape[1],
            bool(fit_kwargs),
        )
        if fit_kwargs and isinstance(self.estimator, SkOneVsRest):
            # OneVsRestClassifier only forwards sample_weight through metadata routing
            with config_context(enable_metadata_routing=True):
                self.estimator.estimator.set_fit_request(sample_weight=True)
                self.estimator.fit(X, y, **fit_kwargs)
        else:
            self.estimator.fit(X, y, **fit_kwargs)
        return self

    def predict(self, frame: pd.DataFrame) -> np.ndarray:
        return self.estimator.predict(self._features(frame))
