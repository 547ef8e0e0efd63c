"""Tagged results for page lookups, definitions and view resolution.

Callers mostly collapse these (absent vs. unreadable, failed vs. empty), but
keeping them as distinct variants lets tests and logs tell them apart.
"""

from dataclasses import dataclass
from typing import Literal, Union

from .page import Page


# ── Page Store lookups ───────────────────────────────────────────────────────

@dataclass(frozen=True)
class PageFound:
    page: Page


@dataclass(frozen=True)
class PageAbsent:
    title: str


@dataclass(frozen=True)
class PageUnreadable:
    title: str
    error: str


PageLookup = Union[PageFound, PageAbsent, PageUnreadable]


# ── Definition Provider ──────────────────────────────────────────────────────

@dataclass(frozen=True)
class Definition:
    title: str
    text: str


@dataclass(frozen=True)
class DefinitionFailed:
    title: str
    error: str


@dataclass(frozen=True)
class DefinitionEmpty:
    title: str


DefinitionOutcome = Union[Definition, DefinitionFailed, DefinitionEmpty]


# ── Page Resolver ────────────────────────────────────────────────────────────

PageSource = Literal["store", "generated"]


@dataclass(frozen=True)
class PageRendered:
    page: Page
    source: PageSource


@dataclass(frozen=True)
class NeedsEdit:
    """No stored page and no usable generated text; a human has to write it."""

    title: str
    cause: DefinitionFailed | DefinitionEmpty


@dataclass(frozen=True)
class SaveFailed:
    title: str
    error: str


Resolution = Union[PageRendered, NeedsEdit, SaveFailed]
