"""
Artifact resolver: grounds a vision model's artifact guess in the museum registry.
"""
from .config import ResolverConfig
from .models import Guess, RegistryEntry
from .orchestration import ResolutionOrchestrator, resolve
from .resolution import MatchResult, RegistryMatcher, find_match, normalize, score, tokenize
from .schemas import ResolutionResponse
from .service import ArtifactResolutionService, create_resolution_service

__all__ = [
    "ResolverConfig",
    "Guess",
    "RegistryEntry",
    "ResolutionResponse",
    "MatchResult",
    "normalize",
    "tokenize",
    "score",
    "find_match",
    "RegistryMatcher",
    "ResolutionOrchestrator",
    "resolve",
    "ArtifactResolutionService",
    "create_resolution_service",
]
