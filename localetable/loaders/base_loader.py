"""Base loader for reading locale files into translation entries."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from localetable.models import LoadResult, LocaleFormat
from localetable.tracing.logger import log_load_event


class BaseLoader(ABC):
    """Abstract base class for locale file loaders.

    A loader reads one file and returns a LoadResult. It never mutates a
    LocaleTable itself; the table swaps in the result's entries.
    """

    format: LocaleFormat
    # File suffixes this loader handles, lowercase with the leading dot
    supported_suffixes: tuple[str, ...] = ()

    def __init__(self, name: str):
        """Initialize the loader.

        Args:
            name: Name used in trace events.
        """
        self.name = name

    def can_load(self, path: str | Path) -> bool:
        """Check if this loader handles the file's suffix."""
        return Path(path).suffix.lower() in self.supported_suffixes

    @abstractmethod
    def load(self, path: str | Path) -> LoadResult:
        """Load a locale file.

        Args:
            path: Path to the file.

        Returns:
            LoadResult holding the parsed entries.
        """
        pass

    def _trace_start(self, source: str) -> None:
        log_load_event("load_start", source, f"{self.name} reading file", level=logging.DEBUG)

    def _trace_complete(self, result: LoadResult) -> None:
        log_load_event(
            "load_complete",
            result.source,
            f"Loaded {result.key_count} keys",
            result.summary(),
        )


def get_loader_for_path(path: str | Path) -> BaseLoader | None:
    """Get the loader matching a file's suffix.

    Args:
        path: The locale file path.

    Returns:
        A loader that can handle the file, or None.
    """
    # Import here to avoid circular imports
    from localetable.loaders.cfg_loader import CfgLoader
    from localetable.loaders.xml_loader import XmlLoader

    loaders: list[BaseLoader] = [XmlLoader(), CfgLoader()]

    for loader in loaders:
        if loader.can_load(path):
            return loader

    return None
