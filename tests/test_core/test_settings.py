"""
Test Suite for environment settings and logging setup.
"""

import logging

import pytest
from pydantic import ValidationError

from automl_engine.contracts import TrainerContext
from automl_engine.core.logging import PACKAGE_LOGGER, configure_logging
from automl_engine.settings import load_settings


@pytest.mark.unit
def test_defaults():
    settings = load_settings()

    assert settings.log_level == "WARNING"
    assert settings.weight_policy == "ignore"
    assert settings.seed is None
    assert settings.n_jobs is None


@pytest.mark.unit
def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("AUTOML_LOG_LEVEL", "debug")
    monkeypatch.setenv("AUTOML_UNSUPPORTED_WEIGHT_POLICY", "RAISE")
    monkeypatch.setenv("AUTOML_SEED", "42")
    monkeypatch.setenv("AUTOML_N_JOBS", "3")

    settings = load_settings()

    assert settings.log_level == "DEBUG"
    assert settings.weight_policy == "raise"
    assert settings.seed == 42
    assert settings.n_jobs == 3


@pytest.mark.unit
def test_invalid_policy_rejected(monkeypatch):
    monkeypatch.setenv("AUTOML_UNSUPPORTED_WEIGHT_POLICY", "shrug")
    with pytest.raises(ValidationError):
        load_settings()


@pytest.mark.unit
def test_context_from_settings(monkeypatch):
    monkeypatch.setenv("AUTOML_SEED", "5")
    ctx = TrainerContext.from_settings()

    assert ctx.seed == 5
    assert ctx.trainer_seed("A") == TrainerContext(seed=5).trainer_seed("A")
    assert ctx.trainer_seed("A") != ctx.trainer_seed("B")
    assert TrainerContext().trainer_seed("A") is None


@pytest.mark.unit
def test_configure_logging_is_idempotent():
    logger = configure_logging("INFO")
    n_handlers = len(logger.handlers)

    configure_logging("DEBUG")

    assert logger.name == PACKAGE_LOGGER
    assert len(logger.handlers) == n_handlers
    assert logger.level == logging.DEBUG
    logger.setLevel(logging.NOTSET)
