"""Positional parsing of lender spreadsheet rows into LenderCriteria."""

import json
import logging
import math
import re
from dataclasses import asdict, fields
from typing import Any, Dict, Iterable, List, Optional, Sequence

from app.models.domain.lender import LenderCriteria

logger = logging.getLogger(__name__)

TEXT = "text"
NUMBER = "number"
BOOLEAN = "boolean"

# Column index -> (field name, kind). Columns 11 and 23 exist in the
# spreadsheet but are not read; every later index depends on them.
COLUMN_MAP: Dict[int, tuple[str, str]] = {
    0: ("lender_name", TEXT),
    1: ("specialty", TEXT),
    2: ("min_fico", NUMBER),
    3: ("min_sbss", NUMBER),
    4: ("time_in_business_months", NUMBER),
    5: ("negative_days", NUMBER),
    6: ("monthly_deposits_required", NUMBER),
    7: ("average_monthly_revenue", NUMBER),
    8: ("average_daily_balances", NUMBER),
    9: ("preferred_industries", TEXT),
    10: ("restricted_industries", TEXT),
    12: ("restricted_industry_exceptions", TEXT),
    13: ("restricted_states", TEXT),
    14: ("ownership_requirement_pct", NUMBER),
    15: ("number_of_positions", NUMBER),
    16: ("allows_bankruptcies", BOOLEAN),
    17: ("tax_liens_limit", NUMBER),
    18: ("min_funding_size", NUMBER),
    19: ("max_funding_size", NUMBER),
    20: ("auto_decline_reasons", TEXT),
    21: ("holdback_percentage", TEXT),
    22: ("payment_type", TEXT),
    24: ("consolidation_positions", NUMBER),
    25: ("additional_information", TEXT),
}

ROW_WIDTH = max(COLUMN_MAP) + 1

_NUMERIC_PREFIX = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return isinstance(value, str) and not value.strip()


def parse_text(value: Any) -> Optional[str]:
    """Trim a text cell; blanks become None. Case is left untouched."""
    if _is_blank(value):
        return None
    return str(value).strip()


def parse_number(value: Any) -> Optional[float]:
    """
    Parse a numeric cell as floating point.

    Strings are read by their leading numeric prefix ("12 months" -> 12.0).
    Anything without one yields None; this never raises and never
    defaults to zero.
    """
    if _is_blank(value) or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)

    match = _NUMERIC_PREFIX.match(str(value).strip())
    if not match:
        return None
    return float(match.group(0))


def parse_boolean(value: Any) -> Optional[bool]:
    """Map yes/true and no/false (case-insensitive) to booleans, else None."""
    if _is_blank(value):
        return None
    text = str(value).strip().lower()
    if text in ("yes", "true"):
        return True
    if text in ("no", "false"):
        return False
    return None


_PARSERS = {
    TEXT: parse_text,
    NUMBER: parse_number,
    BOOLEAN: parse_boolean,
}


def parse_lender_row(row: Sequence[Any]) -> Optional[LenderCriteria]:
    """
    Convert one spreadsheet row into a LenderCriteria.

    Args:
        row: Ordered cell values in the lender spreadsheet column layout.
            Short rows are padded with blanks.

    Returns:
        LenderCriteria, or None when the lender name cell is blank. A
        None result means "skip this row", not an error.
    """
    lender_name = parse_text(row[0]) if row else None
    if lender_name is None:
        return None

    values: Dict[str, Any] = {}
    for index, (field_name, kind) in COLUMN_MAP.items():
        cell = row[index] if index < len(row) else None
        values[field_name] = _PARSERS[kind](cell)

    return LenderCriteria(**values)


def parse_lender_rows(rows: Iterable[Sequence[Any]]) -> List[LenderCriteria]:
    """
    Parse a whole sheet. Row 0 is the header and is always skipped.

    Row order is preserved and lenders are not de-duplicated by name.
    """
    lenders: List[LenderCriteria] = []
    skipped = 0

    for row_number, row in enumerate(rows):
        if row_number == 0:
            continue
        lender = parse_lender_row(row)
        if lender is None:
            skipped += 1
            logger.debug(f"Skipping row {row_number}: no lender name")
            continue
        lenders.append(lender)

    logger.info(f"Parsed {len(lenders)} lenders ({skipped} rows skipped)")
    return lenders


def criteria_to_row(criteria: LenderCriteria) -> List[Any]:
    """Serialize a LenderCriteria back into the spreadsheet column layout."""
    row: List[Any] = [None] * ROW_WIDTH
    for index, (field_name, kind) in COLUMN_MAP.items():
        value = getattr(criteria, field_name)
        if kind == BOOLEAN and value is not None:
            value = "yes" if value else "no"
        row[index] = value
    return row


def lenders_to_json(lenders: Iterable[LenderCriteria]) -> str:
    """Serialize parsed lenders to JSON for caching."""
    return json.dumps([asdict(lender) for lender in lenders], indent=2)


def lenders_from_json(payload: str) -> List[LenderCriteria]:
    """
    Load lenders previously written by lenders_to_json.

    Raises:
        ValueError: If the payload is not a JSON list of lender objects
    """
    data = json.loads(payload)
    if not isinstance(data, list):
        raise ValueError("Lender cache must contain a JSON list")

    known_fields = {f.name for f in fields(LenderCriteria)}
    lenders = []
    for item in data:
        if not isinstance(item, dict) or not item.get("lender_name"):
            raise ValueError(f"Invalid lender entry in cache: {item!r}")
        lenders.append(
            LenderCriteria(**{k: v for k, v in item.items() if k in known_fields})
        )
    return lenders
