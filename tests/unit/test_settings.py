import pytest
from pydantic import ValidationError

from handnotes.config.settings import Settings


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    for name in (
        "APP_ENV",
        "DB_PORT",
        "DB_POOL_MIN_SIZE",
        "DB_POOL_MAX_SIZE",
        "STORAGE_BUCKET",
        "STORAGE_BACKEND",
        "OPENAI_MODEL_NAME",
        "TRANSCRIPTION_PROVIDER",
        "OPENAI_TIMEOUT_SECONDS",
        "IMAGE_FETCH_TIMEOUT_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_db_port(self) -> None:
        s = Settings()
        assert s.db_port == 5432

    def test_default_pool_bounds(self) -> None:
        s = Settings()
        assert (s.db_pool_min_size, s.db_pool_max_size) == (1, 10)

    def test_default_storage_bucket(self) -> None:
        s = Settings()
        assert s.storage_bucket == "handnotes"

    def test_default_storage_backend(self) -> None:
        s = Settings()
        assert s.storage_backend == "s3"

    def test_default_model_name(self) -> None:
        s = Settings()
        assert s.openai_model_name == "gpt-4.1-mini"

    def test_default_transcription_provider(self) -> None:
        s = Settings()
        assert s.transcription_provider == "openai"

    def test_schema_not_applied_by_default(self) -> None:
        s = Settings()
        assert s.db_apply_schema_on_startup is False


class TestSettingsFromEnv:
    def test_loads_app_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ENV", "production")
        s = Settings()
        assert s.app_env == "production"

    def test_loads_bucket(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STORAGE_BUCKET", "notes-prod")
        s = Settings()
        assert s.storage_bucket == "notes-prod"

    def test_loads_model_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPENAI_MODEL_NAME", "gpt-4o")
        s = Settings()
        assert s.openai_model_name == "gpt-4o"

    def test_loads_from_dotenv_file(self, tmp_path) -> None:
        (tmp_path / ".env").write_text("STORAGE_BACKEND=local\n")
        s = Settings()
        assert s.storage_backend == "local"


class TestSettingsValidation:
    def test_invalid_db_port_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_PORT", "not_a_number")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_timeout_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPENAI_TIMEOUT_SECONDS", "abc")
        with pytest.raises(ValidationError):
            Settings()
