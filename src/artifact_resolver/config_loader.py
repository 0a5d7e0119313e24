"""
Configuration loader with validation.
"""
from dotenv import load_dotenv

from .config import ResolverConfig
from .config_validator import (
    get_bool_env,
    get_optional_env,
    parse_number,
    validate_path,
    validate_threshold,
)
from .exceptions import ConfigurationError
from .resolution.tokenizer import DEFAULT_STOPWORDS


def load_config_from_env() -> ResolverConfig:
    """
    Load configuration from environment variables with validation.

    Usage:
        config = load_config_from_env()
        service = create_resolution_service(config)

    :return: Validated ResolverConfig instance
    :raises: ConfigurationError if values are missing or invalid
    """
    # Load .env file if it exists (for local development)
    load_dotenv()

    defaults = ResolverConfig()

    config = ResolverConfig(
        registry_csv_path=get_optional_env("ARTIFACT_REGISTRY_CSV_PATH"),
        registry_csv_url=get_optional_env("ARTIFACT_REGISTRY_CSV_URL"),
        registry_timeout_seconds=parse_number(
            get_optional_env("REGISTRY_TIMEOUT_SECONDS", str(defaults.registry_timeout_seconds)),
            "REGISTRY_TIMEOUT_SECONDS",
        ),
        use_sample_registry_fallback=get_bool_env(
            "USE_SAMPLE_REGISTRY", defaults.use_sample_registry_fallback
        ),
        match_threshold=parse_number(
            get_optional_env("MATCH_THRESHOLD", str(defaults.match_threshold)),
            "MATCH_THRESHOLD",
        ),
        stopwords=_parse_stopwords(get_optional_env("MATCH_STOPWORDS")),
        vision_model_name=get_optional_env("VISION_MODEL_NAME", defaults.vision_model_name),
        vision_base_url=get_optional_env("VISION_BASE_URL"),
        vision_timeout_seconds=parse_number(
            get_optional_env("VISION_TIMEOUT_SECONDS", str(defaults.vision_timeout_seconds)),
            "VISION_TIMEOUT_SECONDS",
        ),
        enable_suggestions=get_bool_env("ENABLE_SUGGESTIONS", defaults.enable_suggestions),
        suggestion_limit=parse_number(
            get_optional_env("SUGGESTION_LIMIT", str(defaults.suggestion_limit)),
            "SUGGESTION_LIMIT",
            cast=int,
        ),
    )

    validate_threshold(config.match_threshold, "MATCH_THRESHOLD")

    for key, timeout in (
        ("VISION_TIMEOUT_SECONDS", config.vision_timeout_seconds),
        ("REGISTRY_TIMEOUT_SECONDS", config.registry_timeout_seconds),
    ):
        if timeout <= 0:
            raise ConfigurationError(f"{key} must be positive, got {timeout}")

    if config.suggestion_limit < 1:
        raise ConfigurationError(f"SUGGESTION_LIMIT must be at least 1, got {config.suggestion_limit}")

    if config.registry_csv_path:
        validate_path(config.registry_csv_path, "ARTIFACT_REGISTRY_CSV_PATH", must_exist=True)

    return config


def _parse_stopwords(value):
    """Comma-separated stopword override; unset keeps the default list."""
    if value is None:
        return DEFAULT_STOPWORDS
    return frozenset(word.strip().lower() for word in value.split(",") if word.strip())
