import pytest
from pydantic import ValidationError

from assetkeeper.core.config import Settings


def test_gemini_key_is_required(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)

    with pytest.raises(ValidationError, match="GEMINI_API_KEY"):
        Settings(_env_file=None)


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "from-env")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-pro")
    monkeypatch.setenv("QR_CODE_PREFIX", "INV")

    settings = Settings(_env_file=None)

    assert settings.GEMINI_API_KEY == "from-env"
    assert settings.GEMINI_MODEL == "gemini-pro"
    assert settings.QR_CODE_PREFIX == "INV"
    assert settings.GEMINI_TIMEOUT == 30.0
