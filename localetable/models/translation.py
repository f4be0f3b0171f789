"""Data models for locale tables and their loaders."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from localetable.errors import MalformedLineError

# Language code -> translated text for a single key.
TranslationSet = dict[str, str]


class LocaleFormat(str, Enum):
    """On-disk format of a locale file."""

    XML = "xml"
    CFG = "cfg"


class CfgEventKind(str, Enum):
    """Kind of event produced while reading a CFG stream."""

    SECTION_START = "section_start"  # [name]
    KEY_VALUE = "key_value"  # key = value
    OPTION = "option"  # --key=value
    ERROR = "error"  # malformed line, reading continues
    EOF = "eof"


@dataclass
class CfgEvent:
    """A single event read from a CFG stream."""

    kind: CfgEventKind
    section: str = ""
    key: str = ""
    value: str = ""
    error: MalformedLineError | None = None


@dataclass
class LoadResult:
    """Outcome of loading one locale file.

    ``section_language`` is None when the file declared no section language;
    the table then keeps whatever it had before.
    """

    source: str
    format: LocaleFormat
    entries: dict[str, TranslationSet] = field(default_factory=dict)
    section_language: str | None = None
    errors: list[MalformedLineError] = field(default_factory=list)
    loaded_at: datetime = field(default_factory=datetime.now)

    @property
    def key_count(self) -> int:
        return len(self.entries)

    def summary(self) -> dict[str, Any]:
        """Short description used in load events."""
        return {
            "format": self.format.value,
            "keys": self.key_count,
            "section_language": self.section_language,
            "errors": len(self.errors),
        }
