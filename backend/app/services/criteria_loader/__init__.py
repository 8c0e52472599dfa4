"""Lender criteria loading from the external lender spreadsheet."""

from .row_parser import (
    COLUMN_MAP,
    criteria_to_row,
    lenders_from_json,
    lenders_to_json,
    parse_lender_row,
    parse_lender_rows,
)
from .spreadsheet_reader import SpreadsheetReader

__all__ = [
    "COLUMN_MAP",
    "SpreadsheetReader",
    "criteria_to_row",
    "lenders_from_json",
    "lenders_to_json",
    "parse_lender_row",
    "parse_lender_rows",
]
