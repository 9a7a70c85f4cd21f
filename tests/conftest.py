from typing import Iterable, List, Tuple

import pytest

from formgrid.domain.schemas.page_data import DocumentData, LineSegment, Orientation, PageData, TextFragment
from formgrid.service.layout_registry_service import LayoutRegistryService

# Synthetic K-1 grid: horizontal rule i sits at y = 40 * i, all starting at x = 0.
# Vertical rules ranked by length: x = 100, 150, 200, 300, 400.
# Resulting boxes for the k1-2024 layout:
#   i_A   x 0..200   y 40..80
#   i_B   x 0..200   y 80..120
#   ii_E  x 0..200   y 240..280
#   ii_F  x 0..200   y 280..320
#   iii_5 x 300..400 y 2400..2440
VLINE_SPECS = [(100.0, 500.0), (150.0, 400.0), (200.0, 300.0), (300.0, 200.0), (400.0, 100.0)]


def hlines(count: int = 62) -> List[LineSegment]:
    return [LineSegment(x=0.0, y=40.0 * i, length=600.0, orientation=Orientation.HORIZONTAL) for i in range(count)]


def vlines(count: int = 5) -> List[LineSegment]:
    specs = VLINE_SPECS[:count]
    # pad with short lines far to the right when more are requested
    specs += [(500.0 + 10 * i, 10.0) for i in range(count - len(specs))]
    return [LineSegment(x=x, y=0.0, length=ln, orientation=Orientation.VERTICAL) for x, ln in specs]


def k1_page(
    texts: Iterable[Tuple[str, float, float]] = (),
    *,
    num: int = 1,
    n_h: int = 62,
    n_v: int = 5,
) -> PageData:
    return PageData(
        num=num,
        texts=[TextFragment(text=t, x=x, y=y) for t, x, y in texts],
        hlines=list(reversed(hlines(n_h))),  # decoders do not sort
        vlines=vlines(n_v),
    )


VALID_TEXTS = [
    ("Acme LLC", 12.0, 50.0),
    ("Ogden", 12.0, 100.0),
    ("Jane Partner", 20.0, 250.0),
]


@pytest.fixture(scope="session")
def registry() -> LayoutRegistryService:
    return LayoutRegistryService()


@pytest.fixture(scope="session")
def k1_layout(registry):
    return registry.get("k1-2024")


@pytest.fixture
def three_page_document() -> DocumentData:
    return DocumentData(
        source="test",
        pages=[
            k1_page([("Acme LLC", 12.0, 50.0)], num=1),
            k1_page(VALID_TEXTS, num=2),
            k1_page([("1,234", 350.0, 2410.0)], num=3),
        ],
    )
