from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .page_data import Orientation


class LineRef(BaseModel):
    """One coordinate used to span a region box.

    Either the n-th line of a normalized sequence (`line` + `index`) or a
    constant `value`. Which coordinate of the line is used (x or y) depends on
    whether the ref sits in a region's `xs` or `ys`.
    """

    line: Optional[Orientation] = None
    index: Optional[int] = Field(default=None, ge=0)
    value: Optional[float] = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_source(self) -> "LineRef":
        by_line = self.line is not None and self.index is not None
        by_value = self.value is not None
        if by_line == by_value:
            raise ValueError("line ref needs either line+index or a constant value")
        if by_value and (self.line is not None or self.index is not None):
            raise ValueError("constant line ref must not name a line")
        return self


class RegionSpec(BaseModel):
    xs: List[LineRef] = Field(..., min_length=1)
    ys: List[LineRef] = Field(..., min_length=1)
    denylist: List[str] = Field(default_factory=list)


class FormLayout(BaseModel):
    """Versioned index table for one revision of a printed form.

    Indices are positions in the normalized line sequences and must be
    re-derived by inspecting a sample document whenever the form changes.
    """

    name: str
    revision: Optional[str] = None
    description: Optional[str] = None
    hline_threshold: int = Field(default=61, ge=0)  # horizontal count must exceed this
    vline_threshold: int = Field(default=4, ge=0)
    min_fields: int = Field(default=2, ge=1)
    regions: Dict[str, RegionSpec] = Field(default_factory=dict)

    @model_validator(mode="after")
    def validate_regions(self) -> "FormLayout":
        if not self.regions:
            raise ValueError(f"layout {self.name!r} defines no regions")
        return self
