"""
Test Suite for one-versus-all composition.

Verifies that OVA extensions wrap the binary trainer built by their inner
extension, delegate sweep ranges, record nested pipeline nodes, and reject
a wrongly-typed delegate.
"""

from dataclasses import FrozenInstanceError, dataclass, field

import pytest
from sklearn.linear_model import LogisticRegression, SGDClassifier
from sklearn.multiclass import OneVsRestClassifier
from sklearn.svm import LinearSVC

from automl_engine.components.trainers import (
    LbfgsLogisticRegressionBinaryExtension,
    LbfgsLogisticRegressionOvaExtension,
    LinearSvmOvaExtension,
    OvaExtension,
    SymbolicSgdLogisticRegressionOvaExtension,
    TrainerEstimator,
    wrap_one_versus_all,
)
from automl_engine.core.errors import UnexpectedTrainerTypeError
from automl_engine.registries import get_trainer_extension, get_trainers


@pytest.fixture
def ova_extensions():
    return [t for t in get_trainers("multiclass") if isinstance(t, OvaExtension)]


# COMPOSITION
@pytest.mark.unit
def test_wraps_binary_trainer_with_exact_values(context, column_info):
    ext = LinearSvmOvaExtension()
    trainer = ext.create_instance(context, {"C": 0.25, "fit_intercept": False, "max_iter": 200}, column_info)

    assert isinstance(trainer, TrainerEstimator)
    assert isinstance(trainer.estimator, OneVsRestClassifier)
    inner = trainer.estimator.estimator
    assert isinstance(inner, LinearSVC)
    assert inner.C == pytest.approx(0.25)
    assert inner.fit_intercept is False
    assert inner.max_iter == 200
    assert trainer.label_column == "Label"


@pytest.mark.unit
def test_every_ova_wraps_its_expected_type(ova_extensions, context, column_info):
    assert len(ova_extensions) == 7
    for ext in ova_extensions:
        trainer = ext.create_instance(context, {}, column_info)
        assert isinstance(trainer.estimator, OneVsRestClassifier)
        assert isinstance(trainer.estimator.estimator, ext.expected_type)


@pytest.mark.unit
def test_sweep_ranges_delegate_to_binary(ova_extensions):
    for ext in ova_extensions:
        assert ext.get_hyperparam_sweep_ranges() == ext.binary.get_hyperparam_sweep_ranges()


@pytest.mark.unit
def test_binary_extension_is_fixed_per_instance():
    ext = SymbolicSgdLogisticRegressionOvaExtension()
    first = ext.binary

    assert ext.binary is first
    with pytest.raises(FrozenInstanceError):
        ext.binary = LbfgsLogisticRegressionBinaryExtension()


# PIPELINE NODES
@pytest.mark.unit
def test_node_records_wrapper_and_inner_trainer(weighted_column_info):
    ext = get_trainer_extension("LbfgsLogisticRegressionOva")
    node = ext.create_pipeline_node({"C": 2.0, "tol": 1e-7}, weighted_column_info)

    assert node.name == "Ova"
    assert node.label_column == "Label"
    inner = node.binary_trainer
    assert inner.name == "LbfgsLogisticRegressionBinary"
    assert inner.hyperparameters() == {"C": 2.0, "tol": 1e-7}
    assert inner.weight_column == "Weight"


# DELEGATION TYPE MISMATCH
@dataclass(frozen=True)
class _MislabelledBinary(LbfgsLogisticRegressionBinaryExtension):
    """Returns an SGD estimator while claiming to be logistic regression."""

    def create_instance(self, context, sweep_params, column_info):
        return TrainerEstimator(name="wrong", estimator=SGDClassifier(), column_info=column_info)


@dataclass(frozen=True)
class _BrokenOva(LbfgsLogisticRegressionOvaExtension):
    binary: object = field(default_factory=_MislabelledBinary)


@pytest.mark.unit
def test_wrong_delegate_type_fails_loudly(context, column_info):
    with pytest.raises(UnexpectedTrainerTypeError, match="LogisticRegression"):
        _BrokenOva().create_instance(context, {}, column_info)


@pytest.mark.unit
def test_non_trainer_delegate_result_rejected(column_info):
    with pytest.raises(UnexpectedTrainerTypeError):
        wrap_one_versus_all(LogisticRegression(), LogisticRegression, column_info)


@pytest.mark.unit
def test_unexpected_type_error_is_a_type_error(context, column_info):
    with pytest.raises(TypeError):
        _BrokenOva().create_instance(context, {}, column_info)


@pytest.mark.unit
def test_registered_ova_is_instance_of_same_class():
    assert isinstance(get_trainer_extension("LbfgsLogisticRegressionOva"), LbfgsLogisticRegressionOvaExtension)
