"""Page operations behind the view, edit and save routes."""

import logging

from autowiki.errors import PageNotFoundError
from autowiki.models import Page, Resolution
from autowiki.services.page.resolver import PageResolver
from autowiki.stores import PageStore

logger = logging.getLogger(__name__)


class PageService:
    """Page-related service operations."""

    def __init__(self, store: PageStore, resolver: PageResolver):
        self._store = store
        self._resolver = resolver

    def view(self, title: str) -> Resolution:
        return self._resolver.resolve(title)

    def edit(self, title: str) -> Page:
        """Stored page, or an empty one for a new title. Never generates content."""
        try:
            return self._store.load(title)
        except PageNotFoundError:
            logger.info("No stored page for %s, editing an empty page", title)
            return Page.empty(title)

    def save(self, title: str, body: str) -> Page:
        """Persist submitted text. Raises PageSaveError on failure."""
        page = Page(title=title, body=body.encode("utf-8"))
        created = not self._store.exists(title)
        self._store.save(page)
        logger.info("%s page %s", "Created" if created else "Updated", title)
        return page
