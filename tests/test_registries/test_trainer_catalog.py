"""
Test Suite for the trainer catalog.

Tests enumeration per task, allowlists, name resolution and shared
instances.
"""

import pytest

from automl_engine.components.trainers import (
    LbfgsMaximumEntropyMultiExtension,
    LinearSvmBinaryExtension,
    OvaExtension,
)
from automl_engine.contracts.choices import trainer_names
from automl_engine.core.errors import UnknownTrainerError
from automl_engine.registries import (
    find_trainer_name,
    get_task,
    get_trainer_extension,
    get_trainer_name,
    get_trainers,
    list_trainer_names,
)


@pytest.mark.unit
@pytest.mark.parametrize("task", ["binary", "multiclass", "regression"])
def test_every_declared_name_is_registered(task):
    assert list_trainer_names(task) == sorted(trainer_names(task))


@pytest.mark.unit
def test_all_names_is_union_of_tasks():
    every = list_trainer_names()
    assert len(every) == sum(len(trainer_names(t)) for t in ("binary", "multiclass", "regression"))


@pytest.mark.unit
def test_get_task():
    assert get_task("LightGbmMulti") == "multiclass"
    assert get_task("OlsRegression") == "regression"
    with pytest.raises(UnknownTrainerError):
        get_task("Nope")


@pytest.mark.unit
def test_shared_instance_per_name():
    a = get_trainer_extension("LinearSvmOva")
    b = get_trainer_extension("LinearSvmOva")
    assert a is b


@pytest.mark.unit
def test_unknown_trainer():
    with pytest.raises(UnknownTrainerError):
        get_trainer_extension("NotATrainer")


@pytest.mark.unit
def test_name_resolution_from_instance_and_type():
    assert get_trainer_name(LbfgsMaximumEntropyMultiExtension()) == "LbfgsMaximumEntropyMulti"
    assert get_trainer_name(LinearSvmBinaryExtension) == "LinearSvmBinary"


@pytest.mark.unit
def test_name_resolution_follows_subclasses():
    class TunedLinearSvm(LinearSvmBinaryExtension):
        pass

    assert find_trainer_name(TunedLinearSvm()) == "LinearSvmBinary"


@pytest.mark.unit
def test_unregistered_extension_has_no_name():
    class Stray:
        pass

    assert find_trainer_name(Stray()) is None
    with pytest.raises(UnknownTrainerError):
        get_trainer_name(Stray())


@pytest.mark.unit
def test_get_trainers_for_task():
    trainers = get_trainers("multiclass")
    names = [get_trainer_name(t) for t in trainers]

    assert names == list_trainer_names("multiclass")
    assert sum(isinstance(t, OvaExtension) for t in trainers) == 7


@pytest.mark.unit
def test_allowlist_filters_and_validates():
    trainers = get_trainers("binary", allowlist=["FastTreeBinary", "LinearSvmBinary", "FastTreeBinary"])
    assert [get_trainer_name(t) for t in trainers] == ["FastTreeBinary", "LinearSvmBinary"]

    with pytest.raises(UnknownTrainerError):
        get_trainers("binary", allowlist=["LightGbmMulti"])
    with pytest.raises(UnknownTrainerError):
        get_trainers("binary", allowlist=["Typo"])
