from __future__ import annotations

from typing import Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ColumnInformation(BaseModel):
    """Which dataset columns play which role.

    Read-only to the trainer extensions. When ``numeric_columns`` is empty the
    feature columns are "everything that has no other role".
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    label_column: str = "Label"
    example_weight_column: Optional[str] = None
    sampling_key_column: Optional[str] = None
    numeric_columns: List[str] = Field(default_factory=list)
    ignored_columns: List[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _one_role_per_column(self) -> "ColumnInformation":
        if not self.label_column:
            raise ValueError("label_column must be a non-empty column name")

        seen: dict[str, str] = {}
        roles = [
            ("label", [self.label_column]),
            ("example weight", [self.example_weight_column] if self.example_weight_column else []),
            ("sampling key", [self.sampling_key_column] if self.sampling_key_column else []),
            ("numeric", self.numeric_columns),
            ("ignored", self.ignored_columns),
        ]
        for role, cols in roles:
            for col in cols:
                if col in seen and seen[col] != role:
                    raise ValueError(
                        f"column {col!r} cannot be both {seen[col]} and {role}"
                    )
                seen[col] = role
        return self

    def non_feature_columns(self) -> List[str]:
        cols = [self.label_column, *self.ignored_columns]
        if self.example_weight_column:
            cols.append(self.example_weight_column)
        if self.sampling_key_column:
            cols.append(self.sampling_key_column)
        return cols

    def resolve_feature_columns(self, columns: Iterable[str]) -> List[str]:
        """Feature columns of a frame with the given column names, in frame order."""
        available = list(columns)
        if self.numeric_columns:
            missing = [c for c in self.numeric_columns if c not in available]
            if missing:
                raise KeyError(f"numeric columns not found in data: {missing}")
            return list(self.numeric_columns)

        excluded = set(self.non_feature_columns())
        return [c for c in available if c not in excluded]
