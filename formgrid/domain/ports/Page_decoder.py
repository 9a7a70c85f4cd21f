from abc import ABC, abstractmethod
from typing import Optional

from formgrid.domain.schemas.page_data import DocumentData


class Page_decoder(ABC):
    @abstractmethod
    def decode(self, data: bytes, *, max_pages: Optional[int] = None) -> DocumentData:
        pass
