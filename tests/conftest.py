"""
Pytest Configuration and Shared Fixtures for the trainer catalog test suite.

Provides:
- column-role fixtures (plain and weighted)
- a seeded TrainerContext
- small synthetic binary / multiclass / regression frames
- isolation from AUTOML_* environment variables
"""

# Third-Party Imports
import numpy as np
import pandas as pd
import pytest

# Internal Imports
from automl_engine.contracts import ColumnInformation, TrainerContext


# ENVIRONMENT
@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep developer AUTOML_* settings out of the tests."""
    for var in ("AUTOML_LOG_LEVEL", "AUTOML_UNSUPPORTED_WEIGHT_POLICY", "AUTOML_SEED", "AUTOML_N_JOBS"):
        monkeypatch.delenv(var, raising=False)


# COLUMN FIXTURES
@pytest.fixture
def column_info():
    return ColumnInformation(label_column="Label")


@pytest.fixture
def weighted_column_info():
    return ColumnInformation(label_column="Label", example_weight_column="Weight")


@pytest.fixture
def context():
    return TrainerContext(seed=7)


# DATA FIXTURES
def _frame(y, seed=0, n_features=4):
    rng = np.random.default_rng(seed)
    X = rng.normal(size=(len(y), n_features))
    # Make the label learnable
    X[:, 0] += np.asarray(y, dtype=float) * 2.0
    frame = pd.DataFrame(X, columns=[f"f{i}" for i in range(n_features)])
    frame["Label"] = y
    frame["Weight"] = rng.uniform(0.5, 1.5, size=len(y))
    return frame


@pytest.fixture
def binary_frame():
    return _frame(np.tile([0, 1], 30), seed=1)


@pytest.fixture
def multiclass_frame():
    return _frame(np.tile([0, 1, 2], 20), seed=2)


@pytest.fixture
def regression_frame():
    rng = np.random.default_rng(3)
    frame = _frame(np.zeros(60), seed=3)
    frame["Label"] = np.abs(frame["f0"] * 3.0 + rng.normal(scale=0.1, size=60)) + 1.0
    return frame
