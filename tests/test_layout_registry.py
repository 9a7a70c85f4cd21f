import json

import pytest
from pydantic import ValidationError

from formgrid.domain.errors import UnknownLayoutError
from formgrid.domain.schemas.form_layout import FormLayout, LineRef
from formgrid.service.layout_registry_service import LayoutRegistryService


def test_packaged_k1_layout(k1_layout):
    assert k1_layout.hline_threshold == 61
    assert k1_layout.vline_threshold == 4
    assert k1_layout.min_fields == 2
    assert sorted(k1_layout.regions) == ["i_A", "i_B", "ii_E", "ii_F", "iii_5"]
    assert "B" in k1_layout.regions["i_A"].denylist


def test_unknown_layout(registry):
    with pytest.raises(UnknownLayoutError):
        registry.get("w2-1999")


def test_extra_dir_overrides_packaged(tmp_path):
    data = {
        "name": "k1-2024",
        "revision": "2024b",
        "min_fields": 3,
        "regions": {"i_A": {"xs": [{"value": 0}, {"value": 10}], "ys": [{"line": "horizontal", "index": 1}]}},
    }
    (tmp_path / "k1.json").write_text(json.dumps(data), encoding="utf-8")
    (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")
    registry = LayoutRegistryService([tmp_path])
    assert registry.get("k1-2024").revision == "2024b"
    assert registry.names() == ["k1-2024"]


def test_invalid_layout_file(tmp_path):
    (tmp_path / "bad.json").write_text(json.dumps({"name": "bad", "regions": {}}), encoding="utf-8")
    with pytest.raises(ValueError):
        LayoutRegistryService([tmp_path], include_packaged=False)


@pytest.mark.parametrize(
    "ref",
    [
        {},
        {"line": "horizontal"},
        {"line": "vertical", "index": 1, "value": 3.0},
        {"index": 2, "value": 3.0},
    ],
)
def test_line_ref_needs_exactly_one_source(ref):
    with pytest.raises(ValidationError):
        LineRef.model_validate(ref)


def test_layout_requires_regions():
    with pytest.raises(ValidationError):
        FormLayout(name="empty")
