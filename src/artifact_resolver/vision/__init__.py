from .vision_tool import VisionTool
from .chat_vision_tool import ChatVisionTool
from .guess_parser import parse_guess
from .prompts import build_curator_prompt

__all__ = ["VisionTool", "ChatVisionTool", "parse_guess", "build_curator_prompt"]
