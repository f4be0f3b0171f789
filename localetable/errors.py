"""Exceptions raised while loading and querying locale tables."""


class LocaleError(Exception):
    """Base class for all locale table errors."""

    pass


class FileOpenError(LocaleError):
    """Raised when a locale file cannot be opened for reading."""

    pass


class ParseError(LocaleError):
    """Raised when an XML locale file is missing or not well-formed."""

    pass


class MalformedLineError(LocaleError):
    """A single unparseable line in a CFG file.

    Recoverable: the CFG loader records it and keeps reading.
    """

    def __init__(self, message: str, filename: str = "", line: int = 0, column: int = 0):
        self.filename = filename
        self.line = line
        self.column = column
        self.message = message
        super().__init__(f"{filename}({line}, {column}) Error: {message}")


class KeyNotFoundError(LocaleError, LookupError):
    """Raised when a lookup key has no entry in the table."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Key '{key}' not found")


class LanguageNotFoundError(LocaleError, LookupError):
    """Raised when a key exists but has no translation for the language."""

    def __init__(self, key: str, lang: str):
        self.key = key
        self.lang = lang
        super().__init__(f"No '{lang}' translation for key '{key}'")
