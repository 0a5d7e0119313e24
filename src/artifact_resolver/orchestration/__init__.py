"""
Orchestration layer for artifact resolution.
"""
from .resolution_orchestrator import (
    ResolutionOrchestrator,
    guess_response,
    registry_response,
    resolve,
)

__all__ = [
    "ResolutionOrchestrator",
    "resolve",
    "registry_response",
    "guess_response",
]
