"""
Tests for the published-sheet registry loader.
"""
import pytest
import requests
from unittest.mock import Mock

from artifact_resolver.config import ResolverConfig
from artifact_resolver.models import Guess
from artifact_resolver.registry import SheetRegistryLoader
from artifact_resolver.service import ArtifactResolutionService

SHEET_URL = "https://docs.example.com/spreadsheets/registry/pub?output=csv"
SHEET_CSV = (
    "Name,Date,Description,Photos\n"
    "Berliner Gramophone,1895,Flat disc gramophone,https://cdn.example.com/a.jpg\n"
)


@pytest.fixture
def session():
    session = Mock()
    session.get.return_value = Mock(text=SHEET_CSV)
    return session


class TestSheetRegistryLoader:
    """Tests for SheetRegistryLoader."""

    def test_fetches_and_parses_sheet(self, session):
        """Test that the sheet CSV is fetched without caching and parsed."""
        entries = SheetRegistryLoader(SHEET_URL, timeout=5.0, session=session).load_entries()

        assert [entry.name for entry in entries] == ["Berliner Gramophone"]
        assert entries[0].photos == ("https://cdn.example.com/a.jpg",)
        session.get.assert_called_once_with(
            SHEET_URL,
            headers={"Cache-Control": "no-store"},
            timeout=5.0,
        )

    def test_connection_failure_yields_empty_registry(self, session):
        """Test that a network failure returns no entries."""
        session.get.side_effect = requests.ConnectionError("network down")

        assert SheetRegistryLoader(SHEET_URL, session=session).load_entries() == []

    def test_http_error_yields_empty_registry(self, session):
        """Test that an HTTP error status returns no entries."""
        session.get.return_value.raise_for_status.side_effect = requests.HTTPError("500 Server Error")

        assert SheetRegistryLoader(SHEET_URL, session=session).load_entries() == []


class TestServiceWithSheet:
    """Tests for the service reading its registry from a sheet URL."""

    def test_sheet_registry_is_used(self, session, monkeypatch):
        """Test that a configured URL takes the place of the CSV file."""
        monkeypatch.setattr(
            "artifact_resolver.registry.sheet_loader.requests.Session", lambda: session
        )
        service = ArtifactResolutionService(ResolverConfig(registry_csv_url=SHEET_URL))

        response = service.resolve_guess(Guess(name="Berliner Gramophone", matched=True))

        assert response.id == "artifact-1"
        assert response.photos == ["https://cdn.example.com/a.jpg"]

    def test_sheet_failure_falls_back_to_samples(self, session, monkeypatch):
        """Test that an unreachable sheet falls back to the sample registry."""
        session.get.side_effect = requests.Timeout("timed out")
        monkeypatch.setattr(
            "artifact_resolver.registry.sheet_loader.requests.Session", lambda: session
        )
        service = ArtifactResolutionService(ResolverConfig(registry_csv_url=SHEET_URL))

        assert [entry.id for entry in service.registry()] == ["sample-1", "sample-2", "sample-3"]

    def test_sheet_failure_without_fallback(self, session, monkeypatch):
        """Test that disabling the fallback leaves the registry empty."""
        session.get.side_effect = requests.ConnectionError("network down")
        monkeypatch.setattr(
            "artifact_resolver.registry.sheet_loader.requests.Session", lambda: session
        )
        service = ArtifactResolutionService(
            ResolverConfig(registry_csv_url=SHEET_URL, use_sample_registry_fallback=False)
        )

        response = service.resolve_guess(Guess(name="Berliner Gramophone", matched=True))

        assert service.registry() == []
        assert response.provenance == "guess"
