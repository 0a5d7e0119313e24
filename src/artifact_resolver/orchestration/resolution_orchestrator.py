"""
Resolution orchestrator - the entry point of identity resolution.

Turns the vision model's guess into the final tagged response:
guess → gate → (conditionally) registry matcher → ResolutionResponse
"""
import logging
from typing import Iterable, Optional, Sequence

from ..models import Guess, RegistryEntry
from ..resolution.match_result import MatchResult
from ..resolution.normalizer import normalize
from ..resolution.registry_matcher import DEFAULT_MATCH_THRESHOLD, RegistryMatcher
from ..resolution.tokenizer import DEFAULT_STOPWORDS
from ..schemas import PROVENANCE_GUESS, PROVENANCE_REGISTRY, ResolutionResponse

logger = logging.getLogger(__name__)


class ResolutionOrchestrator:
    """
    Gates matching on the guess's own claim and builds the response.

    The matcher only runs when the guess claims a match, the registry is not
    empty and the guess name has comparable content. Short or generic names
    from unconfirmed guesses otherwise produce spurious containment matches.
    """

    def __init__(self, matcher: Optional[RegistryMatcher] = None):
        """
        :param matcher: RegistryMatcher to use (defaults to threshold 0.82)
        """
        self._matcher = matcher or RegistryMatcher()

    @property
    def matcher(self) -> RegistryMatcher:
        return self._matcher

    def resolve(self, guess: Guess, entries: Sequence[RegistryEntry]) -> ResolutionResponse:
        """
        Resolve a guess against the registry snapshot.

        :param guess: Structured guess from the vision model
        :param entries: Full registry snapshot
        :return: Registry-provenance response on a confirmed match, guess provenance otherwise
        """
        if guess.matched is not True:
            logger.info(f"Guess '{guess.name}' not claimed as a registry match, skipping matcher")
            return guess_response(guess)

        if not entries:
            logger.warning("Registry is empty, returning unverified guess")
            return guess_response(guess)

        if not normalize(guess.name):
            logger.info("Guess name has no comparable content, returning unverified guess")
            return guess_response(guess)

        result = self._matcher.find_match(guess.name, entries)
        if not result.is_match:
            return guess_response(guess)

        return registry_response(result, guess)


def registry_response(result: MatchResult, guess: Guess) -> ResolutionResponse:
    """
    Build a registry-provenance response from an accepted match.

    Registry fields take precedence; date and description fall back to the
    guess's own values only when the entry leaves them unset.
    """
    entry = result.entry
    return ResolutionResponse(
        provenance=PROVENANCE_REGISTRY,
        id=entry.id,
        name=entry.name,
        date=entry.date if entry.date is not None else guess.date,
        description=entry.description if entry.description is not None else guess.description,
        photos=list(entry.photos),
        score=result.score,
    )


def guess_response(guess: Guess) -> ResolutionResponse:
    """Build a guess-provenance response carrying the raw guess only."""
    return ResolutionResponse(
        provenance=PROVENANCE_GUESS,
        name=guess.name,
        date=guess.date,
        description=guess.description,
    )


def resolve(
    guess: Guess,
    entries: Sequence[RegistryEntry],
    threshold: float = DEFAULT_MATCH_THRESHOLD,
    stopwords: Iterable[str] = DEFAULT_STOPWORDS,
) -> ResolutionResponse:
    """Resolve a guess with an explicitly configured matcher."""
    matcher = RegistryMatcher(threshold=threshold, stopwords=stopwords)
    return ResolutionOrchestrator(matcher).resolve(guess, entries)
