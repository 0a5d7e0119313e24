"""
Near-miss suggestions using rapidfuzz.

Lists the registry names closest to a guess so curators can calibrate the
threshold and stopwords against real data. Suggestions are diagnostics only
and never change a resolution decision.
"""
from dataclasses import dataclass
from typing import List, Sequence

from rapidfuzz import fuzz, process, utils

from ..models import RegistryEntry


@dataclass(frozen=True)
class Suggestion:
    """A registry entry that resembles the guess, with a rapidfuzz score in [0, 1]."""
    entry_id: str
    name: str
    similarity: float


class SuggestionFinder:
    """
    Ranks registry names by fuzzy similarity to a guess name.

    Uses rapidfuzz's token_set_ratio so word order and extra words in the
    guess do not hide an obvious candidate.
    """

    def __init__(self, limit: int = 3, min_similarity: float = 0.5):
        """
        :param limit: Maximum number of suggestions to return
        :param min_similarity: Minimum similarity (0.0-1.0) for a suggestion
        """
        if limit < 1:
            raise ValueError(f"Limit must be at least 1, got {limit}")
        if not 0.0 <= min_similarity <= 1.0:
            raise ValueError(f"min_similarity must be between 0.0 and 1.0, got {min_similarity}")

        self.limit = limit
        self.min_similarity = min_similarity

    def suggest(
        self,
        guess_name: str,
        entries: Sequence[RegistryEntry],
    ) -> List[Suggestion]:
        """
        Return the closest registry entries, best first.

        :param guess_name: Name proposed by the vision model
        :param entries: Registry snapshot
        :return: Up to ``limit`` suggestions above ``min_similarity``
        """
        if not entries or not isinstance(guess_name, str) or not guess_name.strip():
            return []

        choices = {index: entry.name for index, entry in enumerate(entries)}
        results = process.extract(
            guess_name,
            choices,
            scorer=fuzz.token_set_ratio,
            processor=utils.default_process,
            limit=self.limit,
            score_cutoff=self.min_similarity * 100,
        )

        return [
            Suggestion(
                entry_id=entries[index].id,
                name=name,
                similarity=similarity / 100.0,
            )
            for name, similarity, index in results
        ]
