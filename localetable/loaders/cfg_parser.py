"""Event-based reader for INI-style locale files.

Unlike ``configparser`` this reads the file as a stream of events, allows
key-value pairs before the first section header and keeps going after a
malformed line, reporting it as an ERROR event.
"""

import re
from typing import Iterable, Iterator

from localetable.errors import MalformedLineError
from localetable.models import CfgEvent, CfgEventKind

COMMENT_CHARS = ";#"
BOM = "\ufeff"

_INLINE_COMMENT = re.compile(r"\s[;#]")

_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\\": "\\",
    '"': '"',
    "'": "'",
}


class CfgParser:
    """Reads a CFG stream line by line and yields CfgEvents."""

    def __init__(self, stream: Iterable[str | bytes], filename: str = "", encoding: str = "utf-8"):
        self.stream = stream
        self.filename = filename
        self.encoding = encoding
        self._line = 0

    def events(self) -> Iterator[CfgEvent]:
        """Yield one event per meaningful line, then a final EOF event.

        Byte lines are decoded one at a time, so an undecodable line is
        reported like any other malformed line. I/O errors raised by the
        underlying stream propagate unchanged.
        """
        for raw in self.stream:
            self._line += 1
            try:
                line = self._decode(raw).rstrip("\r\n")
                if self._line == 1:
                    line = line.lstrip(BOM)
                event = self._parse_line(line)
            except MalformedLineError as e:
                yield CfgEvent(kind=CfgEventKind.ERROR, error=e)
                continue
            if event is not None:
                yield event
        yield CfgEvent(kind=CfgEventKind.EOF)

    def _decode(self, raw: str | bytes) -> str:
        if isinstance(raw, str):
            return raw
        try:
            return raw.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise self._error(f"invalid {self.encoding} byte 0x{raw[e.start]:02x}", e.start + 1) from e

    def _error(self, message: str, column: int) -> MalformedLineError:
        return MalformedLineError(message, self.filename, self._line, column)

    def _parse_line(self, line: str) -> CfgEvent | None:
        text = line.strip()
        if not text or text[0] in COMMENT_CHARS:
            return None

        indent = len(line) - len(line.lstrip())
        if text.startswith("["):
            return self._parse_section(text, indent)
        if text.startswith("-"):
            key, value = self._split_pair(text.lstrip("-"), indent)
            return CfgEvent(kind=CfgEventKind.OPTION, key=key, value=value)

        key, value = self._split_pair(text, indent)
        return CfgEvent(kind=CfgEventKind.KEY_VALUE, key=key, value=value)

    def _parse_section(self, text: str, indent: int) -> CfgEvent:
        end = text.find("]")
        if end == -1:
            raise self._error("']' expected", indent + len(text) + 1)

        name = text[1:end].strip()
        if not name:
            raise self._error("section name expected", indent + 2)

        rest = text[end + 1:].strip()
        if rest and rest[0] not in COMMENT_CHARS:
            raise self._error(f"unexpected text after section header: {rest!r}", indent + end + 2)

        return CfgEvent(kind=CfgEventKind.SECTION_START, section=name)

    def _split_pair(self, text: str, indent: int) -> tuple[str, str]:
        separators = [i for i in (text.find("="), text.find(":")) if i != -1]
        if not separators:
            # A bare key reads as a pair with an empty value
            key = _strip_comment(text)
            if not key:
                raise self._error("key expected", indent + 1)
            return key, ""

        sep = min(separators)
        key = text[:sep].strip()
        if not key:
            raise self._error("key expected", indent + 1)

        value_column = indent + sep + 2
        return key, self._parse_value(text[sep + 1:], value_column)

    def _parse_value(self, text: str, column: int) -> str:
        value = text.strip()
        if value.startswith('r"'):
            end = value.find('"', 2)
            if end == -1:
                raise self._error("'\"' expected", column + len(text))
            self._check_trailing(value[end + 1:], column + end + 1)
            return value[2:end]

        if value.startswith('"'):
            chars: list[str] = []
            i = 1
            while i < len(value):
                ch = value[i]
                if ch == "\\" and i + 1 < len(value):
                    nxt = value[i + 1]
                    chars.append(_ESCAPES.get(nxt, "\\" + nxt))
                    i += 2
                    continue
                if ch == '"':
                    self._check_trailing(value[i + 1:], column + i + 1)
                    return "".join(chars)
                chars.append(ch)
                i += 1
            raise self._error("'\"' expected", column + len(text))

        return _strip_comment(value)

    def _check_trailing(self, rest: str, column: int) -> None:
        rest = rest.strip()
        if rest and rest[0] not in COMMENT_CHARS:
            raise self._error(f"unexpected text after value: {rest!r}", column)


def _strip_comment(text: str) -> str:
    match = _INLINE_COMMENT.search(text)
    if match:
        text = text[:match.start()]
    return text.strip()
