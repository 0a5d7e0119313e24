"""
Tests for configuration loading and validation.
"""
import pytest

from artifact_resolver.config import ResolverConfig
from artifact_resolver.config_loader import load_config_from_env
from artifact_resolver.config_validator import (
    get_optional_env,
    get_required_env,
    looks_like_template,
    redact,
)
from artifact_resolver.exceptions import ConfigurationError
from artifact_resolver.resolution import DEFAULT_STOPWORDS


class TestLoadConfigFromEnv:
    """Tests for load_config_from_env."""

    def test_defaults(self, clean_env):
        """Test defaults when nothing is set."""
        config = load_config_from_env()

        assert config == ResolverConfig()
        assert config.match_threshold == 0.82
        assert config.stopwords == DEFAULT_STOPWORDS
        assert config.use_sample_registry_fallback is True

    def test_overrides(self, clean_env, tmp_path):
        """Test that environment variables override defaults."""
        registry = tmp_path / "registry.csv"
        registry.write_text("Name,Date,Description,Photos\n", encoding="utf-8")
        clean_env.setenv("ARTIFACT_REGISTRY_CSV_PATH", str(registry))
        clean_env.setenv("MATCH_THRESHOLD", "0.9")
        clean_env.setenv("MATCH_STOPWORDS", "Museum, exhibit ,")
        clean_env.setenv("USE_SAMPLE_REGISTRY", "false")
        clean_env.setenv("ENABLE_SUGGESTIONS", "yes")
        clean_env.setenv("SUGGESTION_LIMIT", "5")

        config = load_config_from_env()

        assert config.registry_csv_path == str(registry)
        assert config.match_threshold == 0.9
        assert config.stopwords == frozenset({"museum", "exhibit"})
        assert config.use_sample_registry_fallback is False
        assert config.enable_suggestions is True
        assert config.suggestion_limit == 5

    @pytest.mark.parametrize("value", ["1.5", "-0.1"])
    def test_threshold_out_of_range(self, clean_env, value):
        """Test that thresholds outside [0, 1] are rejected."""
        clean_env.setenv("MATCH_THRESHOLD", value)

        with pytest.raises(ConfigurationError, match="MATCH_THRESHOLD"):
            load_config_from_env()

    def test_threshold_not_a_number(self, clean_env):
        """Test that non-numeric thresholds are rejected."""
        clean_env.setenv("MATCH_THRESHOLD", "high")

        with pytest.raises(ConfigurationError, match="must be a number"):
            load_config_from_env()

    def test_missing_registry_path(self, clean_env, tmp_path):
        """Test that a configured registry path must exist."""
        clean_env.setenv("ARTIFACT_REGISTRY_CSV_PATH", str(tmp_path / "missing.csv"))

        with pytest.raises(ConfigurationError, match="does not exist"):
            load_config_from_env()

    def test_invalid_suggestion_limit(self, clean_env):
        """Test that a suggestion limit below 1 is rejected."""
        clean_env.setenv("SUGGESTION_LIMIT", "0")

        with pytest.raises(ConfigurationError, match="SUGGESTION_LIMIT"):
            load_config_from_env()


class TestConfigValidator:
    """Tests for env helpers."""

    def test_required_env_missing(self, clean_env):
        """Test that missing required values raise."""
        with pytest.raises(ConfigurationError, match="VISION_API_KEY is required"):
            get_required_env("VISION_API_KEY")

    def test_required_env_placeholder(self, clean_env):
        """Test that placeholder values are rejected."""
        clean_env.setenv("VISION_API_KEY", "your_api_key_here")

        with pytest.raises(ConfigurationError, match="placeholder"):
            get_required_env("VISION_API_KEY")

    def test_optional_env_placeholder_warns(self, clean_env):
        """Test that optional placeholders fall back to the default."""
        clean_env.setenv("VISION_BASE_URL", "https://replace-me.example")

        with pytest.warns(UserWarning):
            assert get_optional_env("VISION_BASE_URL", "https://default") == "https://default"


class TestRegistrySourceConfig:
    """Tests for registry source settings."""

    def test_sheet_url_and_timeout(self, clean_env):
        """Test that the sheet URL and its timeout are read from env."""
        clean_env.setenv("ARTIFACT_REGISTRY_CSV_URL", "https://docs.example.com/pub?output=csv")
        clean_env.setenv("REGISTRY_TIMEOUT_SECONDS", "4")

        config = load_config_from_env()

        assert config.registry_csv_url == "https://docs.example.com/pub?output=csv"
        assert config.registry_timeout_seconds == 4.0

    def test_non_positive_registry_timeout(self, clean_env):
        """Test that a zero registry timeout is rejected."""
        clean_env.setenv("REGISTRY_TIMEOUT_SECONDS", "0")

        with pytest.raises(ConfigurationError, match="REGISTRY_TIMEOUT_SECONDS"):
            load_config_from_env()


class TestTemplateDetection:
    """Tests for template-value detection and secret redaction."""

    @pytest.mark.parametrize("value", ["your_key", "<api-key>", "CHANGEME", "sk-xxx"])
    def test_template_values(self, value):
        assert looks_like_template(value)

    @pytest.mark.parametrize("value", ["", None, "sk-live-0123456789", "https://gateway.example/v1"])
    def test_real_values(self, value):
        assert not looks_like_template(value)

    def test_redact(self):
        assert redact("sk-live-0123456789") == "sk<redacted>89"
        assert redact("short") == "<redacted>"

    def test_placeholder_error_does_not_leak_secret(self, clean_env):
        clean_env.setenv("VISION_API_KEY", "your_secret_value_1234")

        with pytest.raises(ConfigurationError) as excinfo:
            get_required_env("VISION_API_KEY")

        assert "secret_value" not in str(excinfo.value)
