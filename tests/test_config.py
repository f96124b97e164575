import logging

from wordy.config import Settings, configure_logging, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("WORDY_LOG_LEVEL", raising=False)
    monkeypatch.delenv("WORDY_HIGHLIGHT_STYLE", raising=False)

    settings = Settings(_env_file=None)

    assert settings.log_level == "WARNING"
    assert settings.highlight_style == "monokai"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("WORDY_LOG_LEVEL", "debug")
    monkeypatch.setenv("WORDY_HIGHLIGHT_STYLE", "friendly")

    settings = get_settings()

    assert settings.log_level == "debug"
    assert settings.highlight_style == "friendly"


def test_settings_are_cached():
    assert get_settings() is get_settings()


def test_configure_logging():
    configure_logging(Settings(log_level="info"))

    assert logging.getLogger("wordy").level == logging.INFO
    assert logging.getLogger("wordy.interpreter").getEffectiveLevel() == logging.INFO
