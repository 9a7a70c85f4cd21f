from __future__ import annotations

from typing import Sequence

from formgrid.domain.ports.Line_normalizer import Line_normalizer
from formgrid.domain.schemas.page_data import LineSegment
from formgrid.domain.schemas.result_data import NormalizedLines


class LineNormalizerService(Line_normalizer):
    """Put ruling lines into a canonical order.

    Absolute coordinates drift between renderings of the same form, but the
    rank of each line in these orderings does not:
    - horizontal lines by x, then y (ascending);
    - vertical lines by length (descending), then x, then y.
    """

    def normalize(self, hlines: Sequence[LineSegment], vlines: Sequence[LineSegment]) -> NormalizedLines:
        horizontal = sorted(hlines, key=lambda ln: (ln.x, ln.y))
        vertical = sorted(vlines, key=lambda ln: (-ln.length, ln.x, ln.y))
        return NormalizedLines(horizontal=horizontal, vertical=vertical)
