"""
Tiered similarity scoring between a candidate label and a registry label.

Tiers are evaluated in order and the first applicable one wins:
1. exact      - normalized labels are equal                     → 1.0
2. containment - one normalized label contains the other        → 0.85
3. token_set  - Jaccard similarity of the significant-word sets → [0, 1]
"""
from dataclasses import dataclass
from typing import Iterable

from .normalizer import normalize
from .tokenizer import DEFAULT_STOPWORDS, tokenize

EXACT_SCORE = 1.0
CONTAINMENT_SCORE = 0.85

STRATEGY_EXACT = "exact"
STRATEGY_CONTAINMENT = "containment"
STRATEGY_TOKEN_SET = "token_set"


@dataclass(frozen=True)
class LabelScore:
    """Similarity score together with the tier that produced it."""
    score: float
    strategy: str


def score_labels(
    candidate: str,
    registry_label: str,
    stopwords: Iterable[str] = DEFAULT_STOPWORDS,
) -> LabelScore:
    """
    Score two labels and report which tier decided the score.

    :param candidate: Label proposed by the vision model
    :param registry_label: Canonical registry name
    :param stopwords: Words ignored by the token-set tier
    :return: LabelScore with score in [0, 1]
    """
    left = normalize(candidate)
    right = normalize(registry_label)

    if left and right:
        if left == right:
            return LabelScore(EXACT_SCORE, STRATEGY_EXACT)
        if left in right or right in left:
            return LabelScore(CONTAINMENT_SCORE, STRATEGY_CONTAINMENT)

    return LabelScore(jaccard(candidate, registry_label, stopwords), STRATEGY_TOKEN_SET)


def score(
    candidate: str,
    registry_label: str,
    stopwords: Iterable[str] = DEFAULT_STOPWORDS,
) -> float:
    """Similarity score in [0, 1] between two labels."""
    return score_labels(candidate, registry_label, stopwords).score


def jaccard(
    candidate: str,
    registry_label: str,
    stopwords: Iterable[str] = DEFAULT_STOPWORDS,
) -> float:
    """
    Jaccard similarity of the two labels' token sets.

    An empty token set on either side scores 0 so that a label made only of
    filler words never matches anything.
    """
    left = tokenize(candidate, stopwords)
    right = tokenize(registry_label, stopwords)
    if not left or not right:
        return 0.0
    return len(left & right) / len(left | right)
