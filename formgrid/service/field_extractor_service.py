from __future__ import annotations

from typing import List, Optional, Tuple

from formgrid.domain.errors import InsufficientFieldsError, LayoutMismatchError, NoValidPageError
from formgrid.domain.ports.Box_builder import Box_builder
from formgrid.domain.ports.Field_classifier import Field_classifier
from formgrid.domain.ports.Field_extractor_provider import Field_extractor_provider
from formgrid.domain.ports.Line_normalizer import Line_normalizer
from formgrid.domain.schemas.form_layout import FormLayout
from formgrid.domain.schemas.page_data import DocumentData, PageData
from formgrid.domain.schemas.result_data import ExtractionResult, PageAttempt
from formgrid.lib.logger import get_logger

from .bounding_box_service import BoundingBoxService
from .field_classifier_service import FieldClassifierService
from .line_normalizer_service import LineNormalizerService


class FieldExtractorService(Field_extractor_provider):
    """Geometry-based extractor for ruled forms.

    Key points:
    - Boxes are spanned between ranked ruling lines, never fixed coordinates,
      so rescaled or shifted printouts of the same form still line up.
    - A page is accepted only when enough regions are populated; fewer than
      `min_fields` is treated as a coincidence of positioning.
    - Pages are tried in document order and the first valid one wins.
    """

    def __init__(
        self,
        normalizer: Optional[Line_normalizer] = None,
        builder: Optional[Box_builder] = None,
        classifier: Optional[Field_classifier] = None,
    ) -> None:
        self.logger = get_logger("extract")
        self.normalizer = normalizer or LineNormalizerService()
        self.builder = builder or BoundingBoxService()
        self.classifier = classifier or FieldClassifierService()

    def extract_page(self, page: PageData, layout: FormLayout) -> ExtractionResult:
        lines = self.normalizer.normalize(page.hlines, page.vlines)
        try:
            boxes = self.builder.build(lines, layout)
        except LayoutMismatchError as e:
            self.logger.debug("page[%d]: layout mismatch: %s", page.num, e)
            return ExtractionResult()

        denylists = {label: region.denylist for label, region in layout.regions.items()}
        return self.classifier.classify(page.texts, boxes, denylists)

    def extract(
        self,
        document: DocumentData,
        layout: FormLayout,
        min_fields: Optional[int] = None,
    ) -> Tuple[int, ExtractionResult, List[PageAttempt]]:
        threshold = min_fields if min_fields is not None else layout.min_fields
        attempts: List[PageAttempt] = []
        output = ExtractionResult()

        for page in document.pages:
            output = self.extract_page(page, layout)
            try:
                self._check_fields(page.num, output, threshold)
            except InsufficientFieldsError as e:
                self.logger.info("page[%d]: rejected: %s", page.num, e)
                attempts.append(PageAttempt(page=page.num, field_count=output.field_count, reason=str(e)))
                continue

            attempts.append(PageAttempt(page=page.num, field_count=output.field_count, valid=True))
            self.logger.info(
                "page[%d]: accepted for layout=%s; fields=%s",
                page.num,
                layout.name,
                ", ".join(output.fields),
            )
            return page.num, output, attempts

        raise NoValidPageError(
            f"document not recognized as layout {layout.name!r}",
            result=output,
            attempts=attempts,
        )

    def _check_fields(self, page_num: int, output: ExtractionResult, threshold: int) -> None:
        if output.field_count < threshold:
            raise InsufficientFieldsError(page_num, output.field_count, threshold)
