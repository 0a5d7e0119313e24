"""
Result type produced by the registry matcher.
"""
from dataclasses import dataclass
from typing import Optional

from ..models import RegistryEntry

STRATEGY_NONE = "none"


@dataclass(frozen=True)
class MatchResult:
    """
    Immutable outcome of matching a guess name against the registry.

    Attributes:
        entry: The accepted registry entry, or None when nothing met the threshold
        score: Best similarity score seen, between 0.0 and 1.0
        strategy: Scoring tier of the best candidate ("exact", "containment", "token_set", "none")
    """
    entry: Optional[RegistryEntry]
    score: float
    strategy: str = STRATEGY_NONE

    @property
    def is_match(self) -> bool:
        return self.entry is not None

    def __post_init__(self):
        """Validate score."""
        if not 0.0 <= self.score <= 1.0:
            raise ValueError(f"Score must be between 0.0 and 1.0, got {self.score}")
