"""Locale table: translations keyed by phrase, then by language code."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from localetable.detection import get_language_detector
from localetable.errors import FileOpenError, KeyNotFoundError, LanguageNotFoundError
from localetable.loaders import CfgLoader, XmlLoader, get_loader_for_path
from localetable.models import LoadResult, TranslationSet


class LocaleTable:
    """Two-level lookup of translated strings.

    Each load replaces every entry. A section language declared by a CFG file
    stays in effect until another load declares a new one.

    Example::

        table = LocaleTable()
        table.load_cfg("LocaleData.cfg")
        table.get_key_lang("Hello", "de")  # "Hallo"
    """

    def __init__(self, language_detector: Callable[[], str] | None = None):
        """Create an empty table.

        Args:
            language_detector: Zero-argument callable returning the ambient
                language code for ``get_key``. Defaults to the host detector.
        """
        self._entries: dict[str, TranslationSet] = {}
        self._section_language: str | None = None
        self._detect_language = language_detector or get_language_detector()

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        language_detector: Callable[[], str] | None = None,
    ) -> LocaleTable:
        """Create a table and load ``path`` into it."""
        table = cls(language_detector)
        table.load(path)
        return table

    @property
    def section_language(self) -> str | None:
        """Language whose lookups return the key itself."""
        return self._section_language

    def load(self, path: str | Path) -> LoadResult:
        """Load a file, choosing the loader from its suffix.

        Raises:
            FileOpenError: If the suffix is not .xml, .cfg or .ini.
        """
        loader = get_loader_for_path(path)
        if loader is None:
            raise FileOpenError(f"Unsupported locale file: {path}")
        return self._apply(loader.load(path))

    def load_xml(self, path: str | Path) -> LoadResult:
        """Replace the entries with the contents of an XML file.

        Raises:
            ParseError: If the file cannot be opened or parsed.
        """
        return self._apply(XmlLoader().load(path))

    def load_cfg(self, path: str | Path) -> LoadResult:
        """Replace the entries with the contents of a CFG file.

        Raises:
            FileOpenError: If the file cannot be opened.
        """
        return self._apply(CfgLoader().load(path))

    def _apply(self, result: LoadResult) -> LoadResult:
        self._entries = result.entries
        if result.section_language is not None:
            self._section_language = result.section_language
        return result

    def get_key_lang(self, key: str, lang: str) -> str:
        """Get the translation of ``key`` in ``lang``.

        Raises:
            KeyNotFoundError: If the key has no entry.
            LanguageNotFoundError: If the key has no ``lang`` translation.
        """
        if lang == self._section_language:
            return key

        translations = self._entries.get(key)
        if translations is None:
            raise KeyNotFoundError(key)
        if lang not in translations:
            raise LanguageNotFoundError(key, lang)
        return translations[lang]

    def get_key(self, key: str) -> str:
        """Get the translation of ``key`` in the user's language."""
        return self.get_key_lang(key, self._detect_language())
