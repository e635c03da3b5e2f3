"""
Integration tests fitting every registered trainer at the ends of its sweep.

Anything a sweep range accepts must also be accepted by the estimator it
configures, so each trainer is fitted with all params at their lowest and
highest grid values.
"""

import numpy as np
import pytest

from automl_engine.registries import get_task, get_trainer_extension, list_trainer_names

FRAME_FOR_TASK = {
    "binary": "binary_frame",
    "multiclass": "multiclass_frame",
    "regression": "regression_frame",
}


def _grid_end(name, pick):
    ext = get_trainer_extension(name)
    return ext, {p.name: pick(p.grid()) for p in ext.get_hyperparam_sweep_ranges()}


@pytest.mark.integration
@pytest.mark.filterwarnings("ignore::sklearn.exceptions.ConvergenceWarning")
@pytest.mark.parametrize("end", ["low", "high"])
@pytest.mark.parametrize("name", list_trainer_names())
def test_trainer_fits_at_grid_end(name, end, context, weighted_column_info, request):
    frame = request.getfixturevalue(FRAME_FOR_TASK[get_task(name)])
    pick = (lambda g: g[0]) if end == "low" else (lambda g: g[-1])
    ext, values = _grid_end(name, pick)

    trainer = ext.create_instance(context, values, weighted_column_info).fit(frame)

    assert np.isfinite(np.asarray(trainer.predict(frame), dtype=float)).all()


@pytest.mark.integration
def test_float_spelled_discrete_option_fits(context, column_info, multiclass_frame):
    ext = get_trainer_extension("LbfgsMaximumEntropyMulti")

    trainer = ext.create_instance(context, {"max_iter": 100.0}, column_info)
    trainer.fit(multiclass_frame)

    assert trainer.estimator.max_iter == 100
    assert type(trainer.estimator.max_iter) is int
