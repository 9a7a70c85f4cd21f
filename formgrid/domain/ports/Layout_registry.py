from abc import ABC, abstractmethod
from typing import List

from formgrid.domain.schemas.form_layout import FormLayout


class Layout_registry(ABC):
    @abstractmethod
    def get(self, name: str) -> FormLayout:
        pass

    @abstractmethod
    def names(self) -> List[str]:
        pass
