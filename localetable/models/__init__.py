"""Domain models for localetable."""

from localetable.models.translation import (
    CfgEvent,
    CfgEventKind,
    LoadResult,
    LocaleFormat,
    TranslationSet,
)

__all__ = [
    "CfgEvent",
    "CfgEventKind",
    "LoadResult",
    "LocaleFormat",
    "TranslationSet",
]
