from abc import ABC, abstractmethod
from typing import Dict

from formgrid.domain.schemas.bounding_box import BoundingBox
from formgrid.domain.schemas.form_layout import FormLayout
from formgrid.domain.schemas.result_data import NormalizedLines


class Box_builder(ABC):
    @abstractmethod
    def build(self, lines: NormalizedLines, layout: FormLayout) -> Dict[str, BoundingBox]:
        """Return one box per region label.

        Raises LayoutMismatchError when the lines do not fit the layout.
        """
        pass
