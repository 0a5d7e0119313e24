import logging
from typing import List, Optional, Sequence

from .config import ResolverConfig
from .exceptions import ServiceNotInitializedError
from .models import Guess, RegistryEntry
from .orchestration.resolution_orchestrator import ResolutionOrchestrator
from .registry.csv_loader import RegistryLoader
from .registry.sample_registry import SAMPLE_REGISTRY
from .registry.sheet_loader import SheetRegistryLoader
from .resolution.registry_matcher import RegistryMatcher
from .resolution.suggestions import Suggestion, SuggestionFinder
from .schemas import ResolutionResponse
from .vision.vision_tool import VisionTool

logger = logging.getLogger(__name__)


class ArtifactResolutionService:
    """
    Facade over artifact identification.
    The ONLY entry point for the request handlers and the CLI.

    The service performs the I/O (registry read, vision call); the
    resolution core it delegates to is pure.
    """

    def __init__(
        self,
        config: ResolverConfig,
        vision_tool: Optional[VisionTool] = None,
        registry_entries: Optional[Sequence[RegistryEntry]] = None,
    ):
        """
        Composition root. Matcher and orchestrator are wired here.

        :param config: ResolverConfig instance
        :param vision_tool: Optional vision collaborator (required for analyze)
        :param registry_entries: Optional pre-loaded registry snapshot
        """
        self.config = config
        self._vision_tool = vision_tool
        self._entries: Optional[List[RegistryEntry]] = (
            list(registry_entries) if registry_entries is not None else None
        )

        matcher = RegistryMatcher(
            threshold=config.match_threshold,
            stopwords=config.stopwords,
        )
        self._orchestrator = ResolutionOrchestrator(matcher)
        self._suggestion_finder = SuggestionFinder(limit=config.suggestion_limit)

    # ----------------------------
    # Registry
    # ----------------------------
    def registry(self) -> List[RegistryEntry]:
        """Return the registry snapshot, loading it on first use."""
        if self._entries is None:
            self._entries = self._load_registry()
        return self._entries

    def reload_registry(self) -> List[RegistryEntry]:
        """Drop the cached snapshot and read the registry again."""
        self._entries = None
        return self.registry()

    def _load_registry(self) -> List[RegistryEntry]:
        entries: List[RegistryEntry] = []
        if self.config.registry_csv_url:
            entries = SheetRegistryLoader(
                self.config.registry_csv_url,
                timeout=self.config.registry_timeout_seconds,
            ).load_entries()
        elif self.config.registry_csv_path:
            entries = RegistryLoader(self.config.registry_csv_path).load_entries()

        if not entries and self.config.use_sample_registry_fallback:
            logger.warning("Registry is empty, using sample artifacts")
            return list(SAMPLE_REGISTRY)

        return entries

    # ----------------------------
    # Resolution
    # ----------------------------
    def resolve_guess(self, guess: Guess) -> ResolutionResponse:
        """Resolve an already-produced guess against the registry."""
        entries = self.registry()
        response = self._orchestrator.resolve(guess, entries)

        if self.config.enable_suggestions and not response.is_registry_backed:
            for suggestion in self.suggest(guess.name):
                logger.info(
                    f"Near miss for '{guess.name}': '{suggestion.name}' "
                    f"(similarity: {suggestion.similarity:.2f})"
                )

        return response

    def analyze(self, image_url: str) -> ResolutionResponse:
        """
        Identify the artifact in a photo and resolve it against the registry.

        :param image_url: Public URL of the visitor's photo
        :return: ResolutionResponse tagged with its provenance
        :raises: ServiceNotInitializedError if no vision tool is set
        :raises: VisionServiceError when the vision call fails
        """
        if not self._vision_tool:
            raise ServiceNotInitializedError("Vision tool is not initialized.")

        entries = self.registry()
        guess = self._vision_tool.identify(image_url, [entry.name for entry in entries])
        return self.resolve_guess(guess)

    def suggest(self, guess_name: str) -> List[Suggestion]:
        """Registry names closest to a guess name, for calibration."""
        return self._suggestion_finder.suggest(guess_name, self.registry())

    # ----------------------------
    # Dependency injection setters
    # ----------------------------
    def set_vision_tool(self, vision_tool: VisionTool) -> None:
        """Inject a vision tool."""
        self._vision_tool = vision_tool


def create_resolution_service(
    config: ResolverConfig,
    with_vision: bool = True,
) -> ArtifactResolutionService:
    """
    Factory function to create a fully wired ArtifactResolutionService.

    :param config: ResolverConfig instance
    :param with_vision: Whether to build the vision tool (needs VISION_API_KEY)
    :return: ArtifactResolutionService
    """
    vision_tool = None
    if with_vision:
        from .vision_factory import create_vision_tool
        vision_tool = create_vision_tool(config)

    return ArtifactResolutionService(config, vision_tool=vision_tool)
