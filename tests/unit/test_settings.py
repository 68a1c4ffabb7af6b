import pytest
from pydantic import ValidationError

from app.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_db_port(self) -> None:
        s = Settings()
        assert s.db_port == 5432

    def test_default_tables(self) -> None:
        s = Settings()
        assert s.documents_table == "documents"
        assert s.app_state_table == "app_state"

    def test_default_upload_limits(self) -> None:
        s = Settings()
        assert s.upload_max_size_bytes == 50 * 1024 * 1024
        assert s.upload_min_size_bytes == 1024


class TestSettingsFromEnv:
    def test_loads_app_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ENV", "production")
        s = Settings()
        assert s.app_env == "production"

    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_db_host(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_HOST", "db.example.com")
        s = Settings()
        assert s.db_host == "db.example.com"

    def test_loads_documents_table(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DOCUMENTS_TABLE", "documents_staging")
        s = Settings()
        assert s.documents_table == "documents_staging"

    def test_loads_upload_max(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("UPLOAD_MAX_SIZE_BYTES", "1048576")
        s = Settings()
        assert s.upload_max_size_bytes == 1048576


class TestSettingsValidation:
    def test_invalid_db_port_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_PORT", "not_a_number")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_upload_min_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("UPLOAD_MIN_SIZE_BYTES", "abc")
        with pytest.raises(ValidationError):
            Settings()


class TestPoolSettings:
    def test_default_pool_sizes(self) -> None:
        s = Settings()
        assert s.db_pool_min_size == 1
        assert s.db_pool_max_size == 2

    def test_loads_pool_max(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_POOL_MAX_SIZE", "5")
        s = Settings()
        assert s.db_pool_max_size == 5
