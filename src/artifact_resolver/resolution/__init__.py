"""
Artifact identity resolution.

Decides whether a free-text name guessed by a vision model refers to a
specific entry of the curated artifact registry.

Key components:
- normalize / tokenize: canonical comparable forms of labels
- score / score_labels: tiered similarity (exact → containment → token set)
- RegistryMatcher / find_match: best entry with an inclusive acceptance threshold
- SuggestionFinder: near-miss diagnostics for calibration
"""
from .normalizer import normalize
from .tokenizer import DEFAULT_STOPWORDS, tokenize
from .similarity import (
    CONTAINMENT_SCORE,
    EXACT_SCORE,
    LabelScore,
    jaccard,
    score,
    score_labels,
)
from .match_result import MatchResult
from .registry_matcher import DEFAULT_MATCH_THRESHOLD, RegistryMatcher, find_match
from .suggestions import Suggestion, SuggestionFinder

__all__ = [
    "normalize",
    "tokenize",
    "DEFAULT_STOPWORDS",
    "score",
    "score_labels",
    "jaccard",
    "LabelScore",
    "EXACT_SCORE",
    "CONTAINMENT_SCORE",
    "MatchResult",
    "RegistryMatcher",
    "find_match",
    "DEFAULT_MATCH_THRESHOLD",
    "Suggestion",
    "SuggestionFinder",
]
