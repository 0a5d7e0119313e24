"""
VisionTool backed by a LangChain chat model with image input.
"""
import logging
from typing import Any, Optional, Sequence

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage

from ..exceptions import CreditsDepletedError, RateLimitExceededError, VisionServiceError
from ..models import Guess
from .guess_parser import parse_guess
from .prompts import USER_PROMPT, build_curator_prompt
from .vision_tool import VisionTool

logger = logging.getLogger(__name__)


class ChatVisionTool(VisionTool):
    """
    Identifies artifacts by sending the photo to a multimodal chat model.

    The model only proposes a Guess. Whether it matches the registry is
    decided later by the resolution orchestrator.
    """

    def __init__(self, llm: BaseChatModel):
        """
        :param llm: LangChain chat model that accepts image_url content parts
        """
        self._llm = llm

    def identify(self, image_url: str, candidates: Sequence[str] = ()) -> Guess:
        """
        Ask the model to identify the artifact in an image.

        :param image_url: Public URL (or data URL) of the photo
        :param candidates: Registry names shown to the model
        :return: Parsed Guess
        :raises: VisionServiceError (or a subclass) when the model call fails
        """
        messages = [
            SystemMessage(content=build_curator_prompt(candidates)),
            HumanMessage(content=[
                {"type": "text", "text": USER_PROMPT},
                {"type": "image_url", "image_url": {"url": image_url}},
            ]),
        ]

        logger.info("Analyzing artifact image...")
        try:
            reply = self._llm.invoke(messages)
        except Exception as e:
            raise _map_gateway_error(e) from e

        content = _message_text(reply)
        logger.info(f"Vision response: {content}")
        return parse_guess(content)


def _message_text(reply: Any) -> str:
    """Flatten a chat model reply into plain text."""
    content = getattr(reply, "content", reply)
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type") == "text":
                parts.append(part.get("text", ""))
        return "".join(parts)
    return ""


def _map_gateway_error(error: Exception) -> VisionServiceError:
    status_code: Optional[int] = getattr(error, "status_code", None)
    logger.error(f"Vision gateway error: {status_code} {error}")

    if status_code == 429:
        return RateLimitExceededError("Rate limit exceeded. Please try again later.")
    if status_code == 402:
        return CreditsDepletedError("AI credits depleted. Please add funds.")
    if status_code is not None:
        return VisionServiceError(f"Vision gateway error: {status_code}")
    return VisionServiceError(f"Vision call failed: {error}")
