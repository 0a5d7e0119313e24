"""
Registry matching: pick the best registry entry for a guess name.

With the default threshold a containment match (0.85) passes, but token
overlap alone has to be nearly complete.
"""
import logging
from typing import FrozenSet, Iterable, Optional, Sequence

from ..models import RegistryEntry
from .match_result import STRATEGY_NONE, MatchResult
from .similarity import score_labels
from .tokenizer import DEFAULT_STOPWORDS

logger = logging.getLogger(__name__)

DEFAULT_MATCH_THRESHOLD = 0.82


class RegistryMatcher:
    """
    Linear-scan matcher over a registry snapshot.

    Ties keep the first entry in input order: a later entry only replaces the
    current best when its score is strictly higher.

    An entry is accepted when its score is >= threshold and also above zero:
    under a zero threshold a best score of 0.0 is still reported as no match,
    so an unrelated or empty name never picks up the first entry's photos.

    Usage:
        matcher = RegistryMatcher(threshold=0.82)
        result = matcher.find_match("Berliner Gramophone", entries)
        if result.is_match:
            photos = result.entry.photos
    """

    def __init__(
        self,
        threshold: float = DEFAULT_MATCH_THRESHOLD,
        stopwords: Iterable[str] = DEFAULT_STOPWORDS,
    ):
        """
        Initialize registry matcher.

        :param threshold: Minimum score (inclusive) to accept a match (0.0-1.0)
        :param stopwords: Filler words ignored by token-set scoring
        """
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"Threshold must be between 0.0 and 1.0, got {threshold}")

        self.threshold = threshold
        self.stopwords: FrozenSet[str] = frozenset(stopwords)

    def find_match(
        self,
        guess_name: str,
        entries: Sequence[RegistryEntry],
    ) -> MatchResult:
        """
        Find the best-scoring registry entry for a guess name.

        :param guess_name: Name proposed by the vision model
        :param entries: Registry snapshot to search
        :return: MatchResult with the entry if its score >= threshold, else entry=None
        """
        best_entry: Optional[RegistryEntry] = None
        best_score = 0.0
        best_strategy = STRATEGY_NONE

        for entry in entries:
            candidate = score_labels(guess_name, entry.name, self.stopwords)
            logger.debug(
                f"Candidate '{entry.name}' ({entry.id}) - score: {candidate.score:.2f} "
                f"({candidate.strategy})"
            )
            if best_entry is None or candidate.score > best_score:
                best_entry = entry
                best_score = candidate.score
                best_strategy = candidate.strategy

        # A zero score never matches, even under a zero threshold
        if best_entry is not None and best_score > 0.0 and best_score >= self.threshold:
            logger.info(
                f"Registry match: '{guess_name}' → '{best_entry.name}' "
                f"(score: {best_score:.2f}, strategy: {best_strategy})"
            )
            return MatchResult(entry=best_entry, score=best_score, strategy=best_strategy)

        logger.info(
            f"No registry match for '{guess_name}' "
            f"(best score: {best_score:.2f}, threshold: {self.threshold:.2f})"
        )
        return MatchResult(entry=None, score=best_score, strategy=best_strategy)


def find_match(
    guess_name: str,
    entries: Sequence[RegistryEntry],
    threshold: float = DEFAULT_MATCH_THRESHOLD,
    stopwords: Iterable[str] = DEFAULT_STOPWORDS,
) -> MatchResult:
    """Convenience wrapper around RegistryMatcher.find_match."""
    return RegistryMatcher(threshold=threshold, stopwords=stopwords).find_match(guess_name, entries)
