"""Resolve a view request to a stored page, a freshly generated page, or an edit redirect."""

import logging

from autowiki.errors import PageSaveError
from autowiki.models import (
    Definition,
    NeedsEdit,
    Page,
    PageFound,
    PageRendered,
    PageUnreadable,
    Resolution,
    SaveFailed,
)
from autowiki.services.definition import DefinitionProvider
from autowiki.stores import PageStore

logger = logging.getLogger(__name__)


class PageResolver:
    """View-path orchestration.

    Start -> stored page found -> render.
    Start -> no page -> generate -> provider failed or empty -> needs edit.
    Start -> no page -> generate -> text -> save failed -> save error.
    Start -> no page -> generate -> text -> saved -> render.

    An unreadable page file is treated exactly like a missing one.
    """

    def __init__(self, store: PageStore, provider: DefinitionProvider):
        self._store = store
        self._provider = provider

    def resolve(self, title: str) -> Resolution:
        lookup = self._store.lookup(title)
        if isinstance(lookup, PageFound):
            logger.info("Resolved %s from store", title)
            return PageRendered(page=lookup.page, source="store")

        if isinstance(lookup, PageUnreadable):
            logger.warning("Page %s unreadable, treating as absent: %s", title, lookup.error)
        else:
            logger.info("No stored page for %s, generating a definition", title)

        outcome = self._provider.define(title)
        if not isinstance(outcome, Definition):
            logger.info("No definition for %s, falling back to edit", title)
            return NeedsEdit(title=title, cause=outcome)

        page = Page(title=title, body=outcome.text.encode("utf-8"))
        try:
            self._store.save(page)
        except PageSaveError as e:
            return SaveFailed(title=title, error=str(e))
        logger.info("Generated and saved %s", title)
        return PageRendered(page=page, source="generated")
