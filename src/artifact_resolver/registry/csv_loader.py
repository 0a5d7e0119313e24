import csv
import io
import logging
import re
from typing import Iterable, List, Optional

from ..exceptions import RegistryLoadError
from ..models import RegistryEntry

logger = logging.getLogger(__name__)

DEFAULT_NAME = "Untitled"
DEFAULT_DATE = "Unknown date"
DEFAULT_DESCRIPTION = "No description available."


class RegistryLoader:
    """
    Loads the artifact registry from the curators' CSV export.

    Columns are read by position: name, date, description, photos.
    """
    def __init__(self, csv_path: str):
        self.csv_path = csv_path

    def load_entries(self) -> List[RegistryEntry]:
        try:
            with open(self.csv_path, newline="", encoding="utf-8") as f:
                entries = parse_rows(csv.reader(f))
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise RegistryLoadError(f"Could not read registry CSV {self.csv_path}: {e}") from e

        logger.info(f"Loaded {len(entries)} registry entries from {self.csv_path}")
        return entries


def parse_registry_csv(text: str) -> List[RegistryEntry]:
    """Parse registry entries from CSV text (header row included)."""
    return parse_rows(csv.reader(io.StringIO(text.strip())))


def parse_rows(rows: Iterable[List[str]]) -> List[RegistryEntry]:
    entries: List[RegistryEntry] = []

    for row_number, row in enumerate(rows):
        # Header row
        if row_number == 0:
            continue
        if not any(value.strip() for value in row):
            continue
        if len(row) < 4:
            logger.debug(f"Skipping registry row {row_number}: expected 4 columns, got {len(row)}")
            continue

        name, date, description, photos = row[:4]
        entries.append(RegistryEntry(
            id=f"artifact-{row_number}",
            name=_clean_text(name) or DEFAULT_NAME,
            date=_clean_text(date) or DEFAULT_DATE,
            description=_clean_text(description) or DEFAULT_DESCRIPTION,
            photos=tuple(_parse_photos(photos)),
        ))

    return entries


def _clean_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value if value else None


def _parse_photos(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [url.strip() for url in re.split(r"[,;]", value) if url.strip()]
