from .csv_loader import RegistryLoader, parse_registry_csv
from .sample_registry import SAMPLE_REGISTRY
from .sheet_loader import SheetRegistryLoader

__all__ = ["RegistryLoader", "SheetRegistryLoader", "parse_registry_csv", "SAMPLE_REGISTRY"]
