from __future__ import annotations

from typing import List, Optional, Tuple

from formgrid.domain.errors import DocumentDecodeError
from formgrid.domain.ports.Page_decoder import Page_decoder
from formgrid.domain.schemas.page_data import DocumentData, LineSegment, Orientation, PageData, TextFragment
from formgrid.lib.logger import get_logger


class PdfDecodeService(Page_decoder):
    """Extract positioned text lines and ruling lines with PyMuPDF.

    - Text: one fragment per `get_text("dict")` line, spans concatenated,
      positioned at the line's top-left corner.
    - Lines: straight `l` drawing items that are (almost) axis-parallel, plus
      the four edges of every `re` rectangle (one rule when it is thin).
    """

    def __init__(self, *, tolerance: float = 1.0, min_length: float = 3.0) -> None:
        self.tolerance = tolerance
        self.min_length = min_length
        self.logger = get_logger("decode.pdf")

    def decode(self, data: bytes, *, max_pages: Optional[int] = None) -> DocumentData:
        try:
            import fitz  # type: ignore
        except Exception as e:  # pragma: no cover
            raise RuntimeError("pymupdf is required to decode pdf documents") from e

        try:
            doc = fitz.open(stream=data, filetype="pdf")
        except Exception as e:
            raise DocumentDecodeError(f"failed to open pdf: {e}") from e

        pages: List[PageData] = []
        with doc:
            for page in doc:
                if max_pages and len(pages) >= max_pages:
                    break
                texts = self._texts(page)
                hlines, vlines = self._lines(page)
                self.logger.debug(
                    "page[%d]: texts=%d hlines=%d vlines=%d",
                    page.number + 1,
                    len(texts),
                    len(hlines),
                    len(vlines),
                )
                pages.append(
                    PageData(
                        num=page.number + 1,
                        width=float(page.rect.width),
                        height=float(page.rect.height),
                        texts=texts,
                        hlines=hlines,
                        vlines=vlines,
                    )
                )
        return DocumentData(source="pdf", pages=pages)

    def _texts(self, page) -> List[TextFragment]:
        fragments: List[TextFragment] = []
        for block in page.get_text("dict").get("blocks", []):
            if block.get("type") != 0:  # text blocks only
                continue
            for line in block.get("lines", []):
                text = "".join(span.get("text", "") for span in line.get("spans", [])).strip()
                if not text:
                    continue
                x0, y0, *_ = line["bbox"]
                fragments.append(TextFragment(text=text, x=float(x0), y=float(y0)))
        return fragments

    def _lines(self, page) -> Tuple[List[LineSegment], List[LineSegment]]:
        hlines: List[LineSegment] = []
        vlines: List[LineSegment] = []
        for drawing in page.get_drawings():
            for item in drawing.get("items", []):
                if not item:
                    continue
                kind = item[0]
                if kind == "l":
                    p1, p2 = item[1], item[2]
                    self._add_segment(p1.x, p1.y, p2.x, p2.y, hlines, vlines)
                elif kind == "re":
                    r = item[1]
                    # a thin filled rectangle is a single rule
                    if abs(r.y1 - r.y0) <= self.tolerance or abs(r.x1 - r.x0) <= self.tolerance:
                        mid_y = (r.y0 + r.y1) / 2.0
                        mid_x = (r.x0 + r.x1) / 2.0
                        if abs(r.y1 - r.y0) <= self.tolerance:
                            self._add_segment(r.x0, mid_y, r.x1, mid_y, hlines, vlines)
                        else:
                            self._add_segment(mid_x, r.y0, mid_x, r.y1, hlines, vlines)
                        continue
                    self._add_segment(r.x0, r.y0, r.x1, r.y0, hlines, vlines)
                    self._add_segment(r.x0, r.y1, r.x1, r.y1, hlines, vlines)
                    self._add_segment(r.x0, r.y0, r.x0, r.y1, hlines, vlines)
                    self._add_segment(r.x1, r.y0, r.x1, r.y1, hlines, vlines)
        return hlines, vlines

    def _add_segment(
        self,
        x0: float,
        y0: float,
        x1: float,
        y1: float,
        hlines: List[LineSegment],
        vlines: List[LineSegment],
    ) -> None:
        dx = abs(x1 - x0)
        dy = abs(y1 - y0)
        if dy <= self.tolerance and dx >= self.min_length:
            hlines.append(
                LineSegment(x=min(x0, x1), y=(y0 + y1) / 2.0, length=dx, orientation=Orientation.HORIZONTAL)
            )
        elif dx <= self.tolerance and dy >= self.min_length:
            vlines.append(
                LineSegment(x=(x0 + x1) / 2.0, y=min(y0, y1), length=dy, orientation=Orientation.VERTICAL)
            )
