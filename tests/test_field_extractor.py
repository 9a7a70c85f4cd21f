import pytest

from formgrid.domain.errors import NoValidPageError
from formgrid.domain.schemas.page_data import DocumentData
from formgrid.service.field_extractor_service import FieldExtractorService

from conftest import VALID_TEXTS, k1_page


def test_acme_scenario(k1_layout):
    page = k1_page([("Acme LLC", 12, 50), ("B", 12, 50)])
    result = FieldExtractorService().extract_page(page, k1_layout)
    assert result.texts("i_A") == ["Acme LLC"]


def test_k1_page_fields(k1_layout):
    page = k1_page(
        VALID_TEXTS
        + [
            ("Partnership's name, address, city, state, and ZIP code", 5, 41),
            ("X", 10, 290),
            ("Limited partner or other LLC", 30, 290),
            ("1,234", 350, 2410),
            ("Interest  income", 310, 2401),
        ]
    )
    result = FieldExtractorService().extract_page(page, k1_layout)
    assert list(result.fields) == ["i_A", "i_B", "ii_E", "iii_5"]
    assert result.texts("iii_5") == ["1,234"]
    assert "ii_F" not in result.fields


def test_shared_edge_lands_in_both_regions(k1_layout):
    # y = 80 is the bottom of i_A and the top of i_B
    result = FieldExtractorService().extract_page(k1_page([("edge", 50, 80)]), k1_layout)
    assert result.texts("i_A") == ["edge"]
    assert result.texts("i_B") == ["edge"]


def test_below_threshold_page_is_empty(k1_layout):
    page = k1_page(VALID_TEXTS, n_h=60, n_v=5)
    assert FieldExtractorService().extract_page(page, k1_layout).fields == {}


def test_first_valid_page_selected(k1_layout, three_page_document):
    page_num, result, attempts = FieldExtractorService().extract(three_page_document, k1_layout)
    assert page_num == 2
    assert list(result.fields) == ["i_A", "i_B", "ii_E"]
    assert "iii_5" not in result.fields  # only page 3 has it
    assert [(a.page, a.valid) for a in attempts] == [(1, False), (2, True)]


def test_min_fields_override(k1_layout, three_page_document):
    page_num, _, _ = FieldExtractorService().extract(three_page_document, k1_layout, min_fields=1)
    assert page_num == 1

    page_num, _, _ = FieldExtractorService().extract(three_page_document, k1_layout, min_fields=3)
    assert page_num == 2

    with pytest.raises(NoValidPageError) as exc:
        FieldExtractorService().extract(three_page_document, k1_layout, min_fields=4)
    assert exc.value.result.texts("iii_5") == ["1,234"]
    assert [a.valid for a in exc.value.attempts] == [False, False, False]


def test_no_valid_page_reports_last_page(k1_layout):
    doc = DocumentData(
        pages=[
            k1_page([("Acme LLC", 12, 50)], num=1),
            k1_page([("Jane Partner", 20, 250)], num=2),
        ]
    )
    with pytest.raises(NoValidPageError) as exc:
        FieldExtractorService().extract(doc, k1_layout)
    assert exc.value.result.texts("ii_E") == ["Jane Partner"]
    assert [a.page for a in exc.value.attempts] == [1, 2]


def test_empty_document(k1_layout):
    with pytest.raises(NoValidPageError) as exc:
        FieldExtractorService().extract(DocumentData(), k1_layout)
    assert exc.value.result.fields == {}
