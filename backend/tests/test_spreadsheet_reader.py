"""Tests for reading lender spreadsheets into raw rows."""

import io

import pandas as pd
import pytest

from app.services.criteria_loader import SpreadsheetReader, parse_lender_rows

HEADER = ["Lender Name", "Specialty", "Min FICO"] + [f"Column {i}" for i in range(3, 26)]


def _csv_bytes(rows):
    frame = pd.DataFrame(rows)
    return frame.to_csv(header=False, index=False).encode("utf-8")


def test_is_supported():
    assert SpreadsheetReader.is_supported("lenders.xlsx")
    assert SpreadsheetReader.is_supported("LENDERS.CSV")
    assert not SpreadsheetReader.is_supported("old.xls")
    assert not SpreadsheetReader.is_supported("lenders.pdf")
    assert not SpreadsheetReader.is_supported("lenders")


def test_read_csv_rows(acme_row):
    """Test a CSV upload parses into the same lender as the raw row."""
    content = _csv_bytes([HEADER, acme_row])

    rows = SpreadsheetReader.read_rows_from_bytes(content, "lenders.csv")
    lenders = parse_lender_rows(rows)

    assert len(rows) == 2
    assert len(lenders) == 1
    assert lenders[0].lender_name == "Acme Capital"
    assert lenders[0].min_fico == 550
    assert lenders[0].restricted_states == "CA,NY"
    assert lenders[0].allows_bankruptcies is False


def test_read_excel_rows(acme_row):
    buffer = io.BytesIO()
    pd.DataFrame([HEADER, acme_row]).to_excel(buffer, header=False, index=False)

    rows = SpreadsheetReader.read_rows_from_bytes(buffer.getvalue(), "lenders.xlsx")
    lenders = parse_lender_rows(rows)

    assert len(lenders) == 1
    assert lenders[0].max_funding_size == 250000
    assert lenders[0].min_sbss is None


def test_unsupported_extension_raises():
    with pytest.raises(ValueError, match="Unsupported"):
        SpreadsheetReader.read_rows_from_bytes(b"%PDF-1.4", "lenders.pdf")


def test_unreadable_excel_raises_value_error():
    with pytest.raises(ValueError):
        SpreadsheetReader.read_rows_from_bytes(b"not a workbook", "lenders.xlsx")


def test_read_rows_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        SpreadsheetReader.read_rows(tmp_path / "missing.csv")


def test_read_rows_from_disk(tmp_path, acme_row):
    path = tmp_path / "lenders.csv"
    path.write_bytes(_csv_bytes([HEADER, acme_row]))

    rows = SpreadsheetReader.read_rows(path)

    assert rows[1][0] == "Acme Capital"
