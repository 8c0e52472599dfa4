"""Lender catalog service holding the parsed lender criteria in memory."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Sequence, Union

from app.models.domain.lender import LenderCriteria
from app.services.criteria_loader import (
    SpreadsheetReader,
    lenders_from_json,
    lenders_to_json,
    parse_lender_rows,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogLoadStats:
    """
    Outcome of loading a catalog from spreadsheet rows.

    Attributes:
        rows_read: Data rows read, excluding the header row
        lenders_loaded: Rows that produced a lender
        rows_skipped: Rows dropped for having no lender name
    """

    rows_read: int
    lenders_loaded: int
    rows_skipped: int


class LenderCatalog:
    """
    In-memory lender catalog.

    The catalog is replaced as a whole on every load and never mutated in
    place, so concurrent readers may share the current list.
    """

    def __init__(self, lenders: Optional[Sequence[LenderCriteria]] = None):
        self._lenders: tuple = tuple(lenders or ())

    @property
    def lenders(self) -> List[LenderCriteria]:
        return list(self._lenders)

    def __len__(self) -> int:
        return len(self._lenders)

    @property
    def is_empty(self) -> bool:
        return not self._lenders

    def replace(self, lenders: Sequence[LenderCriteria]) -> None:
        """Swap in a new catalog."""
        self._lenders = tuple(lenders)
        logger.info(f"Lender catalog replaced: {len(self._lenders)} lenders")

    def load_rows(self, rows: Sequence[Sequence[Any]]) -> CatalogLoadStats:
        """
        Replace the catalog from raw spreadsheet rows (header row first).

        Args:
            rows: Spreadsheet rows including the header row

        Returns:
            CatalogLoadStats for the load
        """
        lenders = parse_lender_rows(rows)
        rows_read = max(len(rows) - 1, 0)
        self.replace(lenders)
        return CatalogLoadStats(
            rows_read=rows_read,
            lenders_loaded=len(lenders),
            rows_skipped=rows_read - len(lenders),
        )

    def load_upload(self, content: bytes, filename: str) -> CatalogLoadStats:
        """
        Replace the catalog from an uploaded spreadsheet.

        Raises:
            ValueError: If the file type is unsupported or unreadable
        """
        rows = SpreadsheetReader.read_rows_from_bytes(content, filename)
        return self.load_rows(rows)

    def load_spreadsheet(self, path: Union[str, Path]) -> CatalogLoadStats:
        """
        Replace the catalog from a spreadsheet on disk.

        Raises:
            FileNotFoundError: If the spreadsheet does not exist
            ValueError: If the file type is unsupported or unreadable
        """
        rows = SpreadsheetReader.read_rows(Path(path))
        return self.load_rows(rows)

    def load_cache(self, path: Union[str, Path]) -> bool:
        """
        Replace the catalog from a JSON cache file.

        Returns:
            True if the cache existed and was loaded, False if it is missing

        Raises:
            ValueError: If the cache content is invalid
        """
        cache_path = Path(path)
        if not cache_path.exists():
            logger.warning(f"Lender cache not found: {cache_path}")
            return False

        self.replace(lenders_from_json(cache_path.read_text(encoding="utf-8")))
        return True

    def save_cache(self, path: Union[str, Path]) -> None:
        """Write the current catalog to a JSON cache file."""
        cache_path = Path(path)
        cache_path.parent.mkdir(parents=True, exist_ok=True)
        cache_path.write_text(lenders_to_json(self._lenders), encoding="utf-8")
        logger.info(f"Saved {len(self._lenders)} lenders to cache {cache_path}")

    def specialties(self) -> List[str]:
        """Sorted unique specialties present in the catalog."""
        return sorted(
            {lender.specialty for lender in self._lenders if lender.specialty}
        )

    def find(self, name: str) -> Optional[LenderCriteria]:
        """Find a lender by name, ignoring case and surrounding whitespace."""
        wanted = name.strip().casefold()
        for lender in self._lenders:
            if lender.lender_name.casefold() == wanted:
                return lender
        return None
