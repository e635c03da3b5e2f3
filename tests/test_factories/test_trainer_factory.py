"""
Test Suite for node-to-estimator reconstruction.

A PipelineNode produced for a configuration must rebuild an estimator of the
same type with the same hyperparameters as create_instance, including after a
JSON round-trip.
"""

import pytest

from automl_engine.contracts import PipelineNode, TrainerContext
from automl_engine.core.errors import ConfigurationMismatchError, UnknownTrainerError
from automl_engine.factories.trainer_factory import (
    make_pipeline_node,
    make_trainer,
    make_trainer_from_node,
)
from automl_engine.registries import get_trainer_extension, list_trainer_names


def _last_assignment(name):
    ext = get_trainer_extension(name)
    return {p.name: p.grid()[-1] for p in ext.get_hyperparam_sweep_ranges()}


@pytest.mark.unit
@pytest.mark.parametrize("name", list_trainer_names())
def test_node_rebuilds_equivalent_estimator(name, context, weighted_column_info):
    values = _last_assignment(name)
    direct = make_trainer(name, values, weighted_column_info, context=context)

    node = make_pipeline_node(name, values, weighted_column_info)
    restored = PipelineNode.model_validate_json(node.model_dump_json())
    rebuilt = make_trainer_from_node(restored, context=context)

    assert type(rebuilt.estimator) is type(direct.estimator)
    assert rebuilt.get_params() == direct.get_params()
    assert rebuilt.label_column == direct.label_column
    assert rebuilt.weight_column == direct.weight_column
    assert rebuilt.name == direct.name


@pytest.mark.unit
def test_ova_node_resolves_owning_extension(context, column_info):
    node = make_pipeline_node("SgdCalibratedOva", {"alpha": 1e-3}, column_info)
    rebuilt = make_trainer_from_node(node, context=context)

    assert rebuilt.name == "SgdCalibratedOva"
    assert rebuilt.estimator.estimator.loss == "log_loss"
    assert rebuilt.estimator.estimator.alpha == pytest.approx(1e-3)


@pytest.mark.unit
def test_make_trainer_defaults_context_from_settings(column_info, monkeypatch):
    monkeypatch.setenv("AUTOML_SEED", "11")
    a = make_trainer("FastForestBinary", {}, column_info)
    b = make_trainer("FastForestBinary", {}, column_info, context=TrainerContext(seed=11))

    assert a.estimator.random_state == b.estimator.random_state


@pytest.mark.unit
def test_unknown_node_name():
    with pytest.raises(UnknownTrainerError):
        make_trainer_from_node(PipelineNode(name="Mystery", properties={"LabelColumn": "Label"}))


@pytest.mark.unit
def test_ova_node_without_inner_trainer():
    with pytest.raises(ConfigurationMismatchError):
        make_trainer_from_node(PipelineNode(name="Ova", properties={"LabelColumn": "Label"}))


@pytest.mark.unit
def test_node_without_label_column():
    with pytest.raises(ConfigurationMismatchError):
        make_trainer_from_node(PipelineNode(name="OlsRegression", properties={"fit_intercept": True}))


@pytest.mark.unit
def test_tampered_node_hyperparameter_rejected():
    node = PipelineNode(name="OlsRegression", properties={"LabelColumn": "Label", "normalize": True})
    with pytest.raises(ConfigurationMismatchError):
        make_trainer_from_node(node)


@pytest.mark.unit
def test_ova_for_binary_without_wrapper():
    inner = PipelineNode(name="LightGbmBinary", properties={"LabelColumn": "Label"})
    node = PipelineNode(name="Ova", properties={"LabelColumn": "Label", "BinaryTrainer": inner})

    with pytest.raises(UnknownTrainerError):
        make_trainer_from_node(node)
