from pathlib import Path

import pytest
from pydantic import ValidationError

from route_catalog.config import Settings


class TestSettings:
    def test_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        for name in ("OPENAPI_PATH", "HOST", "PORT", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings()
        assert settings.openapi_path == tmp_path / "public" / "openapi.yaml"
        assert settings.host == "0.0.0.0"
        assert settings.port == 3000
        assert settings.log_level == "INFO"

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("OPENAPI_PATH", "/srv/docs/openapi.yaml")
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = Settings()
        assert settings.openapi_path == Path("/srv/docs/openapi.yaml")
        assert settings.port == 8080
        assert settings.log_level == "DEBUG"

    def test_rejects_bad_port(self, monkeypatch):
        monkeypatch.setenv("PORT", "70000")
        with pytest.raises(ValidationError):
            Settings()

    def test_rejects_unknown_log_level(self):
        with pytest.raises(ValidationError):
            Settings(log_level="verbose")
