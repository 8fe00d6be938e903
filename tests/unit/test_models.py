from __future__ import annotations

import dataclasses

import pytest

from mtd_export.models import (
    MISSING,
    Found,
    FormattedDocument,
    LookupTable,
    Missing,
    SeriesData,
)


def test_series_data_defaults():
    s = SeriesData(series_code="S1", series_name="N")
    assert s.catchcopy == ""
    assert s.html_list == ()
    assert s.brand_code == "MSM1"
    assert s.category_code == "M1803060000"
    assert s.notices == ("", "", "", "", "")


def test_series_data_is_immutable():
    s = SeriesData(series_code="S1", series_name="N")
    with pytest.raises(dataclasses.FrozenInstanceError):
        s.series_name = "X"  # type: ignore[misc]


def test_lookup_table_put_and_lookup():
    t = LookupTable(name="brand_code")
    t.put("S1", "B1")
    t.put("S1", "B2")
    t.put("", "B3")
    t.put("S2", "")
    assert t.lookup("S1") == Found("B2")
    assert t.lookup("S2") is MISSING
    assert isinstance(t.lookup("S9"), Missing)
    assert len(t) == 1
    assert t.entries == {"S1": "B2"}


def test_lookup_table_from_mapping():
    t = LookupTable.from_mapping("category_code", {"S1": "C1", "S2": ""})
    assert len(t) == 1


def test_formatted_document_next_id():
    doc = FormattedDocument(series_code="S1", text="", start_id=10, emitted_rows=4)
    assert doc.next_id == 14
