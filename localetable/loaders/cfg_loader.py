"""Loader for INI-style (.cfg) locale files.

Layout::

    SectionLang = en
    [Hello] ;section names are keys written in the section language
    es = "Hola"
    de = "Hallo"
"""

import logging
from pathlib import Path

from localetable.errors import FileOpenError
from localetable.loaders.base_loader import BaseLoader
from localetable.loaders.cfg_parser import CfgParser
from localetable.models import CfgEventKind, LoadResult, LocaleFormat, TranslationSet
from localetable.tracing.logger import log_load_event

logger = logging.getLogger(__name__)

SECTION_LANG_KEY = "SectionLang"


class CfgLoader(BaseLoader):
    """Loader for .cfg/.ini locale files."""

    format = LocaleFormat.CFG
    supported_suffixes = (".cfg", ".ini")

    def __init__(self):
        super().__init__("CfgLoader")

    def load(self, path: str | Path) -> LoadResult:
        """Read sections as keys and their pairs as translations.

        A ``SectionLang`` pair before the first header declares the section
        language. The file is read as UTF-8 (a leading BOM is ignored);
        malformed or undecodable lines are collected in ``errors`` and skipped.

        Raises:
            FileOpenError: If the file cannot be opened.
        """
        source = str(path)
        try:
            fh = open(path, "rb")
        except OSError as e:
            raise FileOpenError("Invalid .cfg") from e

        self._trace_start(source)
        result = LoadResult(source=source, format=self.format)
        entries = result.entries

        section: str | None = None
        translations: TranslationSet = {}
        with fh:
            for event in CfgParser(fh, source).events():
                if event.kind == CfgEventKind.SECTION_START:
                    if translations:
                        entries[section] = translations
                    section = event.section
                    translations = {}
                elif event.kind == CfgEventKind.KEY_VALUE:
                    if section is None and event.key == SECTION_LANG_KEY:
                        result.section_language = event.value
                        log_load_event(
                            "section_language",
                            source,
                            f"Section language declared: {event.value}",
                        )
                    elif section is None:
                        logger.warning(
                            "%s: ignoring '%s' outside of any section", source, event.key
                        )
                    else:
                        translations[event.key] = event.value
                elif event.kind == CfgEventKind.ERROR:
                    result.errors.append(event.error)
                    log_load_event(
                        "malformed_line",
                        source,
                        str(event.error),
                        level=logging.WARNING,
                    )
                elif event.kind == CfgEventKind.EOF:
                    break

        # Only adds the last section when its name is new; a repeated final
        # section does not replace the earlier one.
        if section is not None and section not in entries:
            entries[section] = translations

        self._trace_complete(result)
        return result
