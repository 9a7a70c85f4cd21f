from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Orientation(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class LineSegment(BaseModel):
    """Ruling line drawn on a form page, as reported by the page decoder."""

    x: float
    y: float
    length: float = Field(..., ge=0.0)
    orientation: Orientation

    model_config = ConfigDict(frozen=True)


class TextFragment(BaseModel):
    text: str
    x: float
    y: float


class PageData(BaseModel):
    num: int
    width: Optional[float] = None
    height: Optional[float] = None
    texts: List[TextFragment] = Field(default_factory=list)
    hlines: List[LineSegment] = Field(default_factory=list)
    vlines: List[LineSegment] = Field(default_factory=list)


class DocumentData(BaseModel):
    source: Optional[str] = None  # decoder name, e.g. 'pdf' or 'pdf2json'
    pages: List[PageData] = Field(default_factory=list)
