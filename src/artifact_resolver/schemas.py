from dataclasses import dataclass
from typing import Any, Dict, List, Optional

PROVENANCE_REGISTRY = "registry"
PROVENANCE_GUESS = "guess"


@dataclass(frozen=True)
class ResolutionResponse:
    """
    Final payload returned to the response consumer.

    ``photos`` and ``id`` are only set for registry provenance; a guess
    response never carries photos.
    """
    provenance: str
    name: str
    date: Optional[str]
    description: Optional[str]
    id: Optional[str] = None
    photos: Optional[List[str]] = None
    score: Optional[float] = None

    @property
    def is_registry_backed(self) -> bool:
        return self.provenance == PROVENANCE_REGISTRY

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        if self.is_registry_backed:
            return {
                "provenance": self.provenance,
                "id": self.id,
                "name": self.name,
                "date": self.date,
                "description": self.description,
                "photos": list(self.photos or []),
            }

        return {
            "provenance": self.provenance,
            "name": self.name,
            "date": self.date,
            "description": self.description,
        }
