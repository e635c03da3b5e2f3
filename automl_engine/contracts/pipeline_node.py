from __future__ import annotations

"""Serializable description of one configured pipeline step.

Nodes are consumed by an external pipeline-execution component. They must stay
JSON-friendly: property values are scalars, ``None`` or nested nodes (used by
one-versus-all trainers to record the inner binary trainer).
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .choices import (
    BINARY_TRAINER_PROPERTY,
    FEATURES_COLUMN,
    LABEL_COLUMN_PROPERTY,
    RESERVED_PROPERTIES,
    SCORE_COLUMN,
    WEIGHT_COLUMN_PROPERTY,
    PipelineNodeType,
)

PropertyValue = Union[bool, int, float, str, None, "PipelineNode"]


class PipelineNode(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    node_type: PipelineNodeType = "trainer"
    in_columns: List[str] = Field(default_factory=lambda: [FEATURES_COLUMN])
    out_columns: List[str] = Field(default_factory=lambda: [SCORE_COLUMN])
    properties: Dict[str, PropertyValue] = Field(default_factory=dict)

    @property
    def label_column(self) -> Optional[str]:
        return self.properties.get(LABEL_COLUMN_PROPERTY)  # type: ignore[return-value]

    @property
    def weight_column(self) -> Optional[str]:
        return self.properties.get(WEIGHT_COLUMN_PROPERTY)  # type: ignore[return-value]

    @property
    def binary_trainer(self) -> Optional["PipelineNode"]:
        inner = self.properties.get(BINARY_TRAINER_PROPERTY)
        return inner if isinstance(inner, PipelineNode) else None

    def hyperparameters(self) -> Dict[str, Any]:
        """Node properties minus the reserved column/wrapping keys."""
        return {k: v for k, v in self.properties.items() if k not in RESERVED_PROPERTIES}


PipelineNode.model_rebuild()


__all__ = ["PipelineNode", "PropertyValue"]
