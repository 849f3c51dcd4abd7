import pytest
from pydantic import ValidationError

from media_uploader import __version__
from media_uploader.config import Settings, get_settings
from media_uploader.logging import get_logger
from media_uploader.models import ModelChoice


def test_defaults_point_at_prediction_service(monkeypatch):
    monkeypatch.delenv("MEDIA_UPLOADER_API_BASE", raising=False)
    settings = Settings(_env_file=None)
    assert settings.api_base == "https://deepfake-detector-api-l4ru.onrender.com"
    assert settings.predict_path == "/api/predict"
    assert settings.default_model == "v1"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("MEDIA_UPLOADER_API_BASE", "http://localhost:9000")
    monkeypatch.setenv("MEDIA_UPLOADER_REQUEST_TIMEOUT", "5")
    settings = Settings(_env_file=None)
    assert settings.api_base == "http://localhost:9000"
    assert settings.request_timeout == 5.0


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_logger_binds_initial_values():
    logger = get_logger("tests", component="uploader")
    assert logger is not None
    assert __version__ == "0.1.0"


def test_default_model_is_validated(monkeypatch):
    monkeypatch.setenv("MEDIA_UPLOADER_DEFAULT_MODEL", "v2")
    assert Settings(_env_file=None).default_model is ModelChoice.V2

    monkeypatch.setenv("MEDIA_UPLOADER_DEFAULT_MODEL", "v9")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
