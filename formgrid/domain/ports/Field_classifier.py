from abc import ABC, abstractmethod
from typing import Dict, Iterable, Mapping

from formgrid.domain.schemas.bounding_box import BoundingBox
from formgrid.domain.schemas.page_data import TextFragment
from formgrid.domain.schemas.result_data import ExtractionResult


class Field_classifier(ABC):
    @abstractmethod
    def classify(
        self,
        texts: Iterable[TextFragment],
        boxes: Mapping[str, BoundingBox],
        denylists: Mapping[str, Iterable[str]],
    ) -> ExtractionResult:
        pass
