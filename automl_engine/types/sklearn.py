from __future__ import annotations

"""Shared scikit-learn typing aliases used across the trainer extensions.

The public contracts are pydantic models; internally we want consistent,
lightweight typing without importing sklearn symbols in every module.
"""

from typing import TypeAlias

from sklearn.base import BaseEstimator
from sklearn.multiclass import OneVsRestClassifier


SkEstimator: TypeAlias = BaseEstimator

SkOneVsRest: TypeAlias = OneVsRestClassifier
