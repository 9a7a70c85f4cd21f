from __future__ import annotations

from typing import Dict, List

from formgrid.domain.errors import LayoutMismatchError
from formgrid.domain.ports.Box_builder import Box_builder
from formgrid.domain.schemas.bounding_box import BoundingBox
from formgrid.domain.schemas.form_layout import FormLayout, LineRef
from formgrid.domain.schemas.page_data import Orientation
from formgrid.domain.schemas.result_data import NormalizedLines


class BoundingBoxService(Box_builder):
    """Turn a layout's ordinal line references into region boxes."""

    def build(self, lines: NormalizedLines, layout: FormLayout) -> Dict[str, BoundingBox]:
        n_h = len(lines.horizontal)
        n_v = len(lines.vertical)
        if not (n_h > layout.hline_threshold and n_v > layout.vline_threshold):
            raise LayoutMismatchError(
                f"layout {layout.name!r} needs more than {layout.hline_threshold} horizontal and "
                f"{layout.vline_threshold} vertical lines, page has {n_h}/{n_v}"
            )

        boxes: Dict[str, BoundingBox] = {}
        for label, region in layout.regions.items():
            xs = [self._resolve(ref, lines, "x", label) for ref in region.xs]
            ys = [self._resolve(ref, lines, "y", label) for ref in region.ys]
            boxes[label] = BoundingBox.spanning(xs, ys)
        return boxes

    def _resolve(self, ref: LineRef, lines: NormalizedLines, axis: str, label: str) -> float:
        if ref.value is not None:
            return ref.value
        seq: List = lines.horizontal if ref.line == Orientation.HORIZONTAL else lines.vertical
        if ref.index >= len(seq):
            raise LayoutMismatchError(
                f"region {label!r}: {ref.line.value} line #{ref.index} requested, page has {len(seq)}"
            )
        line = seq[ref.index]
        return line.x if axis == "x" else line.y
