"""Spreadsheet reading adapter for the lender criteria workbook."""

import io
import logging
from pathlib import Path
from typing import Any, List

import pandas as pd

logger = logging.getLogger(__name__)


class SpreadsheetReader:
    """Utility for materializing lender spreadsheets as rows of raw cells."""

    EXCEL_EXTENSIONS = (".xlsx",)
    CSV_EXTENSIONS = (".csv",)

    @classmethod
    def is_supported(cls, filename: str) -> bool:
        """Check whether a file name has a readable spreadsheet extension."""
        suffix = Path(filename).suffix.lower()
        return suffix in cls.EXCEL_EXTENSIONS + cls.CSV_EXTENSIONS

    @staticmethod
    def _frame_to_rows(frame: pd.DataFrame) -> List[List[Any]]:
        """Convert a header-less DataFrame to lists, blanks as None."""
        frame = frame.astype(object)
        frame = frame.where(frame.notna(), None)
        return frame.values.tolist()

    @classmethod
    def read_rows_from_bytes(cls, content: bytes, filename: str) -> List[List[Any]]:
        """
        Read the first sheet of an uploaded spreadsheet.

        Args:
            content: Raw file bytes
            filename: Original file name, used to pick the format

        Returns:
            All rows including the header row, as lists of cell values

        Raises:
            ValueError: If the format is unsupported or the file is unreadable
        """
        suffix = Path(filename).suffix.lower()
        buffer = io.BytesIO(content)

        try:
            if suffix in cls.EXCEL_EXTENSIONS:
                frame = pd.read_excel(buffer, sheet_name=0, header=None, dtype=object)
            elif suffix in cls.CSV_EXTENSIONS:
                frame = pd.read_csv(
                    buffer, header=None, dtype=str, keep_default_na=False
                )
            else:
                raise ValueError(f"Unsupported spreadsheet type: {suffix or filename}")
        except ValueError:
            raise
        except Exception as e:
            logger.error(f"Error reading spreadsheet {filename}: {e}")
            raise ValueError(f"Could not read spreadsheet {filename}: {e}") from e

        rows = cls._frame_to_rows(frame)
        logger.info(f"Read {len(rows)} rows from {filename}")
        return rows

    @classmethod
    def read_rows(cls, path: Path) -> List[List[Any]]:
        """
        Read the first sheet of a spreadsheet on disk.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the format is unsupported or the file is unreadable
        """
        if not path.exists():
            raise FileNotFoundError(f"Spreadsheet not found: {path}")
        return cls.read_rows_from_bytes(path.read_bytes(), path.name)
