"""Detection of the user's ambient language code."""

import ctypes
import os
import sys
from abc import ABC, abstractmethod

from localetable.config import Settings

UNKNOWN_LANGUAGE = "Unknown"

# GetLocaleInfoW LCTYPE for the ISO 639-1 language name
LOCALE_SISO639LANGNAME = 0x59


class LanguageDetector(ABC):
    """Source of the language code used by ``LocaleTable.get_key``."""

    @abstractmethod
    def detect(self) -> str:
        """Return a language code such as "en", or UNKNOWN_LANGUAGE."""
        pass

    def __call__(self) -> str:
        return self.detect()


class StaticLanguageDetector(LanguageDetector):
    """Always reports the same code."""

    def __init__(self, code: str):
        self.code = code

    def detect(self) -> str:
        return self.code


class EnvLanguageDetector(LanguageDetector):
    """Reads a POSIX locale variable such as ``LANG=de_DE.UTF-8``.

    Returns the part before the first underscore, or the whole value when
    there is none.
    """

    def __init__(self, var: str = "LANG"):
        self.var = var

    def detect(self) -> str:
        value = os.environ.get(self.var, "")
        if not value:
            return UNKNOWN_LANGUAGE
        return value.split("_", 1)[0]


class WindowsLanguageDetector(LanguageDetector):
    """Asks Windows for the user-default locale's ISO 639-1 name."""

    def detect(self) -> str:
        kernel32 = ctypes.windll.kernel32  # type: ignore[attr-defined]
        lcid = kernel32.GetUserDefaultLCID()
        buf = ctypes.create_unicode_buffer(9)
        if not kernel32.GetLocaleInfoW(lcid, LOCALE_SISO639LANGNAME, buf, len(buf)):
            return UNKNOWN_LANGUAGE
        return buf.value or UNKNOWN_LANGUAGE


def get_language_detector(settings: Settings | None = None) -> LanguageDetector:
    """Pick a detector for this host.

    A configured ``language`` wins; otherwise Windows uses the OS locale and
    everything else reads ``lang_env_var``.
    """
    settings = settings or Settings()
    if settings.language:
        return StaticLanguageDetector(settings.language)
    if sys.platform == "win32":
        return WindowsLanguageDetector()
    return EnvLanguageDetector(settings.lang_env_var)


def get_locale_name() -> str:
    """Retrieve the user's language as an ISO 639-1 code string."""
    return get_language_detector().detect()
