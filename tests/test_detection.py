"""Ambient language detection tests."""

from unittest.mock import patch

from localetable.config import Settings
from localetable.detection import (
    UNKNOWN_LANGUAGE,
    EnvLanguageDetector,
    StaticLanguageDetector,
    WindowsLanguageDetector,
    get_language_detector,
    get_locale_name,
)


class TestEnvLanguageDetector:
    """POSIX environment detection."""

    def test_language_before_underscore(self, monkeypatch):
        monkeypatch.setenv("LANG", "de_DE.UTF-8")
        assert EnvLanguageDetector().detect() == "de"

    def test_unset_is_unknown(self, monkeypatch):
        monkeypatch.delenv("LANG", raising=False)
        assert EnvLanguageDetector().detect() == UNKNOWN_LANGUAGE

    def test_empty_is_unknown(self, monkeypatch):
        monkeypatch.setenv("LANG", "")
        assert EnvLanguageDetector().detect() == UNKNOWN_LANGUAGE

    def test_value_without_underscore_returned_whole(self, monkeypatch):
        monkeypatch.setenv("LANG", "C")
        assert EnvLanguageDetector().detect() == "C"

    def test_custom_variable(self, monkeypatch):
        monkeypatch.setenv("LC_MESSAGES", "es_ES")
        assert EnvLanguageDetector("LC_MESSAGES").detect() == "es"

    def test_detector_is_callable(self, monkeypatch):
        monkeypatch.setenv("LANG", "fr_FR")
        assert EnvLanguageDetector()() == "fr"


class TestGetLanguageDetector:
    """Runtime detector selection."""

    def test_configured_language_wins(self):
        detector = get_language_detector(Settings(language="ja"))
        assert isinstance(detector, StaticLanguageDetector)
        assert detector.detect() == "ja"

    def test_posix_uses_env(self):
        with patch("localetable.detection.sys.platform", "linux"):
            detector = get_language_detector(Settings(language="", lang_env_var="LC_ALL"))
        assert isinstance(detector, EnvLanguageDetector)
        assert detector.var == "LC_ALL"

    def test_windows_uses_os_locale(self):
        with patch("localetable.detection.sys.platform", "win32"):
            detector = get_language_detector(Settings(language=""))
        assert isinstance(detector, WindowsLanguageDetector)

    def test_get_locale_name(self, monkeypatch):
        monkeypatch.delenv("LOCALETABLE_LANGUAGE", raising=False)
        monkeypatch.setenv("LANG", "pt_BR.UTF-8")
        with patch("localetable.detection.sys.platform", "linux"):
            assert get_locale_name() == "pt"
