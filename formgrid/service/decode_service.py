from __future__ import annotations

from typing import Optional

from formgrid.domain.errors import DocumentDecodeError
from formgrid.domain.schemas.page_data import DocumentData
from formgrid.domain.schemas.source_type import Source_type

from .decode_pdf2json_service import Pdf2JsonDecodeService
from .decode_pdf_service import PdfDecodeService


class DecodeService:
    """Pick a page decoder for the payload and run it.

    An explicit source type wins; otherwise the content type, the file
    extension and finally the leading bytes decide.
    """

    def __init__(
        self,
        pdf: Optional[PdfDecodeService] = None,
        pdf2json: Optional[Pdf2JsonDecodeService] = None,
    ) -> None:
        self.pdf = pdf or PdfDecodeService()
        self.pdf2json = pdf2json or Pdf2JsonDecodeService()

    def run(
        self,
        data: bytes,
        *,
        filename: Optional[str] = None,
        content_type: Optional[str] = None,
        source_type: Optional[Source_type] = None,
        max_pages: Optional[int] = None,
    ) -> DocumentData:
        kind = source_type or self.detect(data, filename, content_type)
        if kind == Source_type.PDF:
            return self.pdf.decode(data, max_pages=max_pages)
        return self.pdf2json.decode(data, max_pages=max_pages)

    def detect(self, data: bytes, filename: Optional[str], content_type: Optional[str]) -> Source_type:
        ct = (content_type or "").lower()
        name = (filename or "").lower()
        if "pdf" in ct or name.endswith(".pdf"):
            return Source_type.PDF
        if "json" in ct or name.endswith(".json"):
            return Source_type.PDF2JSON
        head = data[:1024].lstrip()
        if head.startswith(b"%PDF"):
            return Source_type.PDF
        if head.startswith(b"{"):
            return Source_type.PDF2JSON
        raise DocumentDecodeError("unrecognized document: expected a PDF or pdf2json output")
