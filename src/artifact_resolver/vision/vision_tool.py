from typing import Protocol, Sequence

from ..models import Guess


class VisionTool(Protocol):
    """Protocol for the vision call that identifies a photographed artifact."""
    def identify(self, image_url: str, candidates: Sequence[str]) -> Guess:
        ...
