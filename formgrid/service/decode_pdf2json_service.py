from __future__ import annotations

import json
from typing import Any, Dict, List, Optional
from urllib.parse import unquote

from formgrid.domain.errors import DocumentDecodeError
from formgrid.domain.ports.Page_decoder import Page_decoder
from formgrid.domain.schemas.page_data import DocumentData, LineSegment, Orientation, PageData, TextFragment


class Pdf2JsonDecodeService(Page_decoder):
    """Read the JSON written by the `pdf2json` tool.

    Accepts both the legacy `{"formImage": {"Pages": [...]}}` envelope and the
    newer top-level `{"Pages": [...]}`. Each text item is the concatenation of
    its URI-encoded runs (`R[].T`), trimmed.
    """

    def decode(self, data: bytes, *, max_pages: Optional[int] = None) -> DocumentData:
        try:
            raw = json.loads(data)
        except (ValueError, UnicodeDecodeError) as e:
            raise DocumentDecodeError(f"invalid pdf2json document: {e}") from e
        if not isinstance(raw, dict):
            raise DocumentDecodeError("invalid pdf2json document: top level is not an object")

        root = raw.get("formImage", raw)
        raw_pages = root.get("Pages") if isinstance(root, dict) else None
        if not isinstance(raw_pages, list):
            raise DocumentDecodeError("invalid pdf2json document: no Pages array")

        if max_pages:
            raw_pages = raw_pages[:max_pages]
        pages = [self._page(num, p) for num, p in enumerate(raw_pages, start=1)]
        return DocumentData(source="pdf2json", pages=pages)

    def _page(self, num: int, raw: Dict[str, Any]) -> PageData:
        if not isinstance(raw, dict):
            raise DocumentDecodeError(f"page {num}: expected an object, got {type(raw).__name__}")
        try:
            texts = [self._text(t) for t in raw.get("Texts", [])]
            hlines = [self._line(ln, Orientation.HORIZONTAL) for ln in raw.get("HLines", [])]
            vlines = [self._line(ln, Orientation.VERTICAL) for ln in raw.get("VLines", [])]
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise DocumentDecodeError(f"page {num}: malformed pdf2json item: {e}") from e
        return PageData(
            num=num,
            width=raw.get("Width"),
            height=raw.get("Height"),
            texts=texts,
            hlines=hlines,
            vlines=vlines,
        )

    def _text(self, item: Dict[str, Any]) -> TextFragment:
        runs: List[str] = [unquote(r.get("T", "")) for r in item.get("R", [])]
        return TextFragment(text="".join(runs).strip(), x=float(item["x"]), y=float(item["y"]))

    def _line(self, item: Dict[str, Any], orientation: Orientation) -> LineSegment:
        return LineSegment(
            x=float(item["x"]),
            y=float(item["y"]),
            length=float(item.get("l", 0.0)),
            orientation=orientation,
        )
