import pytest

from src.config import DEFAULT_PORT, load_settings


def test_defaults(monkeypatch):
    for name in ("RECEIPTS_HOST", "RECEIPTS_PORT", "RECEIPTS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = load_settings()
    assert settings.host == "0.0.0.0"
    assert settings.port == DEFAULT_PORT
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("RECEIPTS_HOST", "127.0.0.1")
    monkeypatch.setenv("RECEIPTS_PORT", "9000")
    monkeypatch.setenv("RECEIPTS_LOG_LEVEL", "debug")
    settings = load_settings()
    assert (settings.host, settings.port, settings.log_level) == ("127.0.0.1", 9000, "DEBUG")


@pytest.mark.parametrize("port", ["eighty", "0", "70000"])
def test_bad_port(monkeypatch, port):
    monkeypatch.setenv("RECEIPTS_PORT", port)
    with pytest.raises(ValueError):
        load_settings()
