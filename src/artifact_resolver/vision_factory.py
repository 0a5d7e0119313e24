from typing import Optional

from langchain_openai import ChatOpenAI

from .config import ResolverConfig
from .config_validator import get_required_env
from .vision.chat_vision_tool import ChatVisionTool


def create_vision_tool(config: Optional[ResolverConfig] = None) -> ChatVisionTool:
    """
    Factory function to create a configured ChatVisionTool.

    The vision tool ONLY proposes a guess; registry matching is the
    orchestrator's responsibility.

    :param config: ResolverConfig instance (defaults used if not provided)
    :return: ChatVisionTool backed by an OpenAI-compatible chat endpoint
    :raises: ConfigurationError if VISION_API_KEY is not set
    """
    config = config or ResolverConfig()

    api_key = get_required_env(
        "VISION_API_KEY",
        description="API key for the OpenAI-compatible vision gateway",
    )

    llm = ChatOpenAI(
        model=config.vision_model_name,
        api_key=api_key,
        base_url=config.vision_base_url,
        timeout=config.vision_timeout_seconds,
        streaming=False,
    )
    return ChatVisionTool(llm)
