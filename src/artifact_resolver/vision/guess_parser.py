"""
Parsing of the vision model reply into a Guess.
"""
import json
import logging
import re
from typing import Any, Optional

from ..models import Guess

logger = logging.getLogger(__name__)

UNKNOWN_NAME = "Unknown Artifact"
UNKNOWN_DATE = "Unknown date"
UNANALYZABLE_DESCRIPTION = "Unable to analyze this artifact."

_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")


def parse_guess(content: Optional[str]) -> Guess:
    """
    Extract the JSON object from a model reply and build a Guess.

    Models often wrap the JSON in prose or code fences, so the outermost
    ``{...}`` block is used. Unparseable replies fall back to an
    "Unknown Artifact" guess that never claims a match.

    :param content: Raw text of the model reply
    :return: Guess built from the reply
    """
    text = content or ""
    match = _JSON_OBJECT.search(text)

    if match:
        try:
            data: Any = json.loads(match.group(0))
        except json.JSONDecodeError as e:
            logger.warning(f"Failed to parse vision reply as JSON: {e}")
        else:
            if isinstance(data, dict):
                return Guess.from_dict(data)
            logger.warning(f"Vision reply JSON is not an object: {type(data).__name__}")
    else:
        logger.warning("No JSON found in vision reply")

    return Guess(
        name=UNKNOWN_NAME,
        date=UNKNOWN_DATE,
        description=text or UNANALYZABLE_DESCRIPTION,
        matched=False,
    )
