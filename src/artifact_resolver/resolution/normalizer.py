"""
Label normalization for artifact name comparison.

Turns a raw label into a canonical comparable form so that case, accents,
punctuation and spacing never influence a match.
"""
import re
import unicodedata

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9 ]")
_WHITESPACE = re.compile(r"\s+")


def normalize(label: str) -> str:
    """
    Normalize a label for comparison.

    "É. Berliner" → "e berliner"

    :param label: Raw label (non-string input is treated as empty)
    :return: Lower-case ASCII letters, digits and single spaces, trimmed
    """
    if not isinstance(label, str):
        return ""

    decomposed = unicodedata.normalize("NFKD", label.lower())
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    # NFKD can reintroduce upper-case forms for a few compatibility characters
    cleaned = _NON_ALPHANUMERIC.sub(" ", stripped.lower())
    return _WHITESPACE.sub(" ", cleaned).strip()
