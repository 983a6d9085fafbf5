"""Unit tests for application settings configuration."""

from pathlib import Path

from app.config import Settings


def test_settings_uses_project_env_file_independent_of_cwd():
    """Settings should always include the project .env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_project_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_project_env in normalized
    assert str(Path(".env")) in normalized


def test_settings_defaults_match_fixture_conventions():
    settings = Settings(_env_file=None)
    assert settings.fixture_category_count == 10
    assert settings.fixture_locale == "fr_FR"


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///:memory:")
    monkeypatch.setenv("FIXTURE_CATEGORY_COUNT", "3")

    settings = Settings(_env_file=None)

    assert settings.database_url == "sqlite:///:memory:"
    assert settings.fixture_category_count == 3
