from __future__ import annotations

"""Literal-based choice sets shared across contracts and the catalog."""

from typing import Literal, Tuple, get_args

TaskKind = Literal["binary", "multiclass", "regression"]

BinaryTrainerName = Literal[
    "AveragedPerceptronBinary",
    "FastForestBinary",
    "FastTreeBinary",
    "LightGbmBinary",
    "LinearSvmBinary",
    "LbfgsLogisticRegressionBinary",
    "SdcaLogisticRegressionBinary",
    "SgdCalibratedBinary",
    "SymbolicSgdLogisticRegressionBinary",
]

MulticlassTrainerName = Literal[
    "AveragedPerceptronOva",
    "FastForestOva",
    "FastTreeOva",
    "LightGbmMulti",
    "LinearSvmOva",
    "LbfgsLogisticRegressionOva",
    "LbfgsMaximumEntropyMulti",
    "SdcaMaximumEntropyMulti",
    "SgdCalibratedOva",
    "SymbolicSgdLogisticRegressionOva",
]

RegressionTrainerName = Literal[
    "FastForestRegression",
    "FastTreeRegression",
    "LightGbmRegression",
    "OnlineGradientDescentRegression",
    "OlsRegression",
    "LbfgsPoissonRegression",
]

PipelineNodeType = Literal["trainer"]

# Name of the wrapping node built for one-versus-all trainers.
OVA_NODE_NAME = "Ova"

# Reserved node property keys (everything else is a hyperparameter).
LABEL_COLUMN_PROPERTY = "LabelColumn"
WEIGHT_COLUMN_PROPERTY = "WeightColumn"
BINARY_TRAINER_PROPERTY = "BinaryTrainer"
RESERVED_PROPERTIES: Tuple[str, ...] = (
    LABEL_COLUMN_PROPERTY,
    WEIGHT_COLUMN_PROPERTY,
    BINARY_TRAINER_PROPERTY,
)

# Column names the featurized pipeline feeds into / out of a trainer node.
FEATURES_COLUMN = "Features"
SCORE_COLUMN = "Score"


def trainer_names(task: TaskKind) -> Tuple[str, ...]:
    mapping = {
        "binary": BinaryTrainerName,
        "multiclass": MulticlassTrainerName,
        "regression": RegressionTrainerName,
    }
    return get_args(mapping[task])
