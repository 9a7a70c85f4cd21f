from __future__ import annotations

from typing import Dict, Iterable, List, Mapping

from formgrid.domain.ports.Field_classifier import Field_classifier
from formgrid.domain.schemas.bounding_box import BoundingBox
from formgrid.domain.schemas.page_data import TextFragment
from formgrid.domain.schemas.result_data import ExtractionResult


class FieldClassifierService(Field_classifier):
    """Assign text fragments to every region box that contains them.

    Static form text (section headers, letters, checkbox captions) often sits
    inside the same box as the data, so each region carries a denylist of
    exact strings that are never reported for it.
    """

    def classify(
        self,
        texts: Iterable[TextFragment],
        boxes: Mapping[str, BoundingBox],
        denylists: Mapping[str, Iterable[str]],
    ) -> ExtractionResult:
        deny = {label: frozenset(denylists.get(label, ())) for label in boxes}
        fields: Dict[str, List[TextFragment]] = {}
        for fragment in texts:
            for label, box in boxes.items():
                if not box.contains(fragment.x, fragment.y):
                    continue
                if fragment.text in deny[label]:
                    continue
                fields.setdefault(label, []).append(fragment)
        return ExtractionResult(fields={k: fields[k] for k in sorted(fields)})
