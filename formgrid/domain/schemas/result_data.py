from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .page_data import LineSegment, TextFragment


class NormalizedLines(BaseModel):
    horizontal: List[LineSegment] = Field(default_factory=list)
    vertical: List[LineSegment] = Field(default_factory=list)


class ExtractionResult(BaseModel):
    # region label -> fragments in encounter order; labels sorted, never empty
    fields: Dict[str, List[TextFragment]] = Field(default_factory=dict)

    @property
    def field_count(self) -> int:
        return len(self.fields)

    def texts(self, label: str) -> List[str]:
        return [f.text for f in self.fields.get(label, [])]


class PageAttempt(BaseModel):
    page: int
    field_count: int = 0
    valid: bool = False
    reason: Optional[str] = None


class MetaInfo(BaseModel):
    request_id: Optional[str] = None
    source: Optional[str] = None
    timings_ms: Dict[str, int] = Field(default_factory=dict)


class ResultData(BaseModel):
    meta: MetaInfo = Field(default_factory=MetaInfo)
    layout: Optional[str] = None
    page: Optional[int] = None
    result: ExtractionResult = Field(default_factory=ExtractionResult)
    attempts: List[PageAttempt] = Field(default_factory=list)
