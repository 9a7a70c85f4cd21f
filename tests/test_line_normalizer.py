from formgrid.domain.schemas.page_data import LineSegment, Orientation
from formgrid.service.line_normalizer_service import LineNormalizerService


def _h(x, y, length=10.0):
    return LineSegment(x=x, y=y, length=length, orientation=Orientation.HORIZONTAL)


def _v(x, y, length):
    return LineSegment(x=x, y=y, length=length, orientation=Orientation.VERTICAL)


def test_horizontal_sorted_by_x_then_y():
    lines = [_h(5, 1), _h(0, 9), _h(0, 3), _h(5, 0)]
    out = LineNormalizerService().normalize(lines, [])
    assert [(ln.x, ln.y) for ln in out.horizontal] == [(0, 3), (0, 9), (5, 0), (5, 1)]


def test_vertical_sorted_by_length_desc_then_x_then_y():
    lines = [_v(3, 0, 10), _v(1, 5, 50), _v(1, 2, 50), _v(0, 0, 10), _v(9, 9, 80)]
    out = LineNormalizerService().normalize([], lines)
    assert [(ln.length, ln.x, ln.y) for ln in out.vertical] == [
        (80, 9, 9),
        (50, 1, 2),
        (50, 1, 5),
        (10, 0, 0),
        (10, 3, 0),
    ]


def test_normalize_is_idempotent_and_leaves_input_alone():
    h = [_h(2, 2), _h(1, 7), _h(1, 3)]
    v = [_v(4, 0, 5), _v(2, 0, 9)]
    normalizer = LineNormalizerService()
    first = normalizer.normalize(h, v)
    second = normalizer.normalize(first.horizontal, first.vertical)
    assert first == second
    assert [ln.x for ln in h] == [2, 1, 1]


def test_empty_input():
    out = LineNormalizerService().normalize([], [])
    assert out.horizontal == [] and out.vertical == []
