import pytest

CONFIG_ENV_KEYS = [
    "ARTIFACT_REGISTRY_CSV_PATH",
    "ARTIFACT_REGISTRY_CSV_URL",
    "REGISTRY_TIMEOUT_SECONDS",
    "USE_SAMPLE_REGISTRY",
    "MATCH_THRESHOLD",
    "MATCH_STOPWORDS",
    "VISION_MODEL_NAME",
    "VISION_BASE_URL",
    "VISION_TIMEOUT_SECONDS",
    "VISION_API_KEY",
    "ENABLE_SUGGESTIONS",
    "SUGGESTION_LIMIT",
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Clear resolver settings and keep load_dotenv away from any local .env."""
    for key in CONFIG_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("artifact_resolver.config_loader.load_dotenv", lambda: False)
    return monkeypatch
