from dataclasses import dataclass
from typing import FrozenSet, Optional

from .resolution.registry_matcher import DEFAULT_MATCH_THRESHOLD
from .resolution.tokenizer import DEFAULT_STOPWORDS


@dataclass
class ResolverConfig:
    # Registry
    registry_csv_path: Optional[str] = None
    registry_csv_url: Optional[str] = None
    registry_timeout_seconds: float = 10.0
    use_sample_registry_fallback: bool = True

    # Matching
    match_threshold: float = DEFAULT_MATCH_THRESHOLD
    stopwords: FrozenSet[str] = DEFAULT_STOPWORDS

    # Vision
    vision_model_name: str = "google/gemini-2.5-flash"
    vision_base_url: Optional[str] = None
    vision_timeout_seconds: float = 30.0

    # Diagnostics
    enable_suggestions: bool = False
    suggestion_limit: int = 3
