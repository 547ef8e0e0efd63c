"""Page model and tagged result types."""

from .page import TITLE_PATTERN, Page, is_valid_title
from .outcomes import (
    Definition,
    DefinitionEmpty,
    DefinitionFailed,
    DefinitionOutcome,
    NeedsEdit,
    PageAbsent,
    PageFound,
    PageLookup,
    PageRendered,
    PageUnreadable,
    Resolution,
    SaveFailed,
)

__all__ = [
    "TITLE_PATTERN",
    "Page",
    "is_valid_title",
    "Definition",
    "DefinitionEmpty",
    "DefinitionFailed",
    "DefinitionOutcome",
    "NeedsEdit",
    "PageAbsent",
    "PageFound",
    "PageLookup",
    "PageRendered",
    "PageUnreadable",
    "Resolution",
    "SaveFailed",
]
