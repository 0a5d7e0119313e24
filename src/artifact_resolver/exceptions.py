class ArtifactResolverError(Exception):
    """Base exception for the artifact resolver service."""


class ConfigurationError(ArtifactResolverError):
    """Raised when configuration is missing or invalid."""


class RegistryLoadError(ArtifactResolverError):
    """Raised when the artifact registry cannot be read."""


class VisionServiceError(ArtifactResolverError):
    """Raised when the vision model call fails."""


class RateLimitExceededError(VisionServiceError):
    """Raised when the vision gateway rejects the call with HTTP 429."""


class CreditsDepletedError(VisionServiceError):
    """Raised when the vision gateway rejects the call with HTTP 402."""


class ServiceNotInitializedError(ArtifactResolverError):
    """Raised when the service is used before its collaborators are wired."""
