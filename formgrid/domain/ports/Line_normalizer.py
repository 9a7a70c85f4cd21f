from abc import ABC, abstractmethod
from typing import Sequence

from formgrid.domain.schemas.page_data import LineSegment
from formgrid.domain.schemas.result_data import NormalizedLines


class Line_normalizer(ABC):
    @abstractmethod
    def normalize(self, hlines: Sequence[LineSegment], vlines: Sequence[LineSegment]) -> NormalizedLines:
        """Sort both line sets into a deterministic, coordinate-independent order."""
        pass
