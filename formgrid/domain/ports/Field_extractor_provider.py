from abc import ABC, abstractmethod
from typing import Optional, Tuple

from formgrid.domain.schemas.form_layout import FormLayout
from formgrid.domain.schemas.page_data import DocumentData, PageData
from formgrid.domain.schemas.result_data import ExtractionResult, PageAttempt


class Field_extractor_provider(ABC):
    @abstractmethod
    def extract_page(self, page: PageData, layout: FormLayout) -> ExtractionResult:
        pass

    @abstractmethod
    def extract(
        self,
        document: DocumentData,
        layout: FormLayout,
        min_fields: Optional[int] = None,
    ) -> Tuple[int, ExtractionResult, list[PageAttempt]]:
        """Return (page number, result, attempts) for the first valid page.

        Raises NoValidPageError when no page passes the field-count check.
        """
        pass
