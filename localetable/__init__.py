"""Load localized strings from XML or CFG files and look them up by language."""

from localetable.detection import (
    UNKNOWN_LANGUAGE,
    EnvLanguageDetector,
    LanguageDetector,
    StaticLanguageDetector,
    WindowsLanguageDetector,
    get_language_detector,
    get_locale_name,
)
from localetable.errors import (
    FileOpenError,
    KeyNotFoundError,
    LanguageNotFoundError,
    LocaleError,
    MalformedLineError,
    ParseError,
)
from localetable.models import LoadResult, LocaleFormat, TranslationSet
from localetable.table import LocaleTable

__all__ = [
    "LocaleTable",
    "LoadResult",
    "LocaleFormat",
    "TranslationSet",
    # Detection
    "UNKNOWN_LANGUAGE",
    "LanguageDetector",
    "EnvLanguageDetector",
    "StaticLanguageDetector",
    "WindowsLanguageDetector",
    "get_language_detector",
    "get_locale_name",
    # Errors
    "LocaleError",
    "FileOpenError",
    "ParseError",
    "MalformedLineError",
    "KeyNotFoundError",
    "LanguageNotFoundError",
]
