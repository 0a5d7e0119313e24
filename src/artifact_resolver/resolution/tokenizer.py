"""
Tokenization of normalized labels into significant words.
"""
from typing import FrozenSet, Iterable

from .normalizer import normalize

# Generic filler the vision model adds to names ("Unknown Audio Artifact").
DEFAULT_STOPWORDS: FrozenSet[str] = frozenset({
    "artifact",
    "artefact",
    "unknown",
    "object",
    "item",
    "non",
    "audio",
})


def tokenize(label: str, stopwords: Iterable[str] = DEFAULT_STOPWORDS) -> FrozenSet[str]:
    """
    Split a label into its set of significant words.

    :param label: Raw label
    :param stopwords: Words to discard after normalization
    :return: Set of tokens (order irrelevant, duplicates collapsed)
    """
    excluded = stopwords if isinstance(stopwords, (set, frozenset)) else frozenset(stopwords)
    return frozenset(
        token
        for token in normalize(label).split(" ")
        if token and token not in excluded
    )
