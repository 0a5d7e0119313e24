"""
Registry loader for the curators' published spreadsheet (CSV export URL).

A failed fetch yields an empty registry; the service then applies its
sample-registry fallback.
"""
import logging
from typing import List, Optional

import requests

from ..models import RegistryEntry
from .csv_loader import parse_registry_csv

logger = logging.getLogger(__name__)


class SheetRegistryLoader:
    """Fetches the registry CSV over HTTP on every load, bypassing caches."""

    def __init__(
        self,
        csv_url: str,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        """
        :param csv_url: Published CSV export URL of the registry sheet
        :param timeout: Request timeout in seconds
        :param session: Optional requests session (for connection reuse or testing)
        """
        self.csv_url = csv_url
        self.timeout = timeout
        self._session = session or requests.Session()

    def load_entries(self) -> List[RegistryEntry]:
        try:
            response = self._session.get(
                self.csv_url,
                headers={"Cache-Control": "no-store"},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Error fetching registry sheet {self.csv_url}: {e}")
            return []

        entries = parse_registry_csv(response.text)
        logger.info(f"Loaded {len(entries)} registry entries from {self.csv_url}")
        return entries
