"""Tests for the in-memory lender catalog."""

import pandas as pd
import pytest

from app.models.domain.lender import LenderCriteria
from app.services.catalog_service import CatalogLoadStats, LenderCatalog

HEADER = ["Lender Name", "Specialty", "Min FICO"]


def test_load_rows_reports_stats(acme_row):
    catalog = LenderCatalog()

    stats = catalog.load_rows([HEADER, acme_row, ["", "orphan"], ["Beta", "LOC"]])

    assert stats == CatalogLoadStats(rows_read=3, lenders_loaded=2, rows_skipped=1)
    assert [lender.lender_name for lender in catalog.lenders] == ["Acme Capital", "Beta"]


def test_load_rows_replaces_catalog(catalog, acme_row):
    catalog.load_rows([HEADER, acme_row])

    assert len(catalog) == 1


def test_lenders_returns_a_copy(catalog):
    lenders = catalog.lenders
    lenders.clear()

    assert len(catalog) == 3


def test_empty_catalog():
    catalog = LenderCatalog()

    assert catalog.is_empty
    assert catalog.lenders == []
    assert catalog.specialties() == []


def test_specialties_sorted_and_unique(catalog):
    catalog.replace(
        catalog.lenders + [LenderCriteria(lender_name="Second MCA", specialty="MCA")]
    )

    assert catalog.specialties() == ["MCA", "SBA"]


def test_find_ignores_case(catalog):
    assert catalog.find(" acme capital ").lender_name == "Acme Capital"
    assert catalog.find("Nobody") is None


def test_cache_round_trip(catalog, tmp_path):
    path = tmp_path / "cache" / "lenders.json"
    catalog.save_cache(path)

    restored = LenderCatalog()
    assert restored.load_cache(path)

    assert restored.lenders == catalog.lenders


def test_missing_cache_is_reported(tmp_path):
    catalog = LenderCatalog()

    assert catalog.load_cache(tmp_path / "missing.json") is False
    assert catalog.is_empty


def test_invalid_cache_raises(tmp_path):
    path = tmp_path / "lenders.json"
    path.write_text('{"not": "a list"}', encoding="utf-8")

    with pytest.raises(ValueError):
        LenderCatalog().load_cache(path)


def test_load_spreadsheet(tmp_path, acme_row):
    path = tmp_path / "lenders.csv"
    pd.DataFrame([HEADER + [None] * 23, acme_row]).to_csv(path, header=False, index=False)

    catalog = LenderCatalog()
    stats = catalog.load_spreadsheet(path)

    assert stats.lenders_loaded == 1
    assert catalog.find("Acme Capital").restricted_states == "CA,NY"


def test_load_spreadsheet_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        LenderCatalog().load_spreadsheet(tmp_path / "missing.xlsx")


def test_load_upload_rejects_unsupported_type(catalog):
    with pytest.raises(ValueError):
        catalog.load_upload(b"%PDF", "lenders.pdf")

    assert len(catalog) == 3
