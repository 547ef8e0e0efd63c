"""Flat-file page storage: one <title>.txt per page."""

import logging
import os
from pathlib import Path

from autowiki.errors import InvalidTitleError, PageNotFoundError, PageSaveError
from autowiki.models import Page, PageAbsent, PageFound, PageLookup, PageUnreadable, is_valid_title

logger = logging.getLogger(__name__)

PAGE_SUFFIX = ".txt"
PAGE_FILE_MODE = 0o600


class PageStore:
    """Reads and writes page bodies under a single directory.

    No index, no versioning and no locking: concurrent saves of the same title
    are last-writer-wins.
    """

    def __init__(self, root: Path | str):
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def path_for(self, title: str) -> Path:
        """File path for a title. Titles are re-checked here, not only at the router."""
        if not is_valid_title(title):
            raise InvalidTitleError(title)
        return self._root / f"{title}{PAGE_SUFFIX}"

    def exists(self, title: str) -> bool:
        return self.path_for(title).is_file()

    def lookup(self, title: str) -> PageLookup:
        path = self.path_for(title)
        try:
            body = path.read_bytes()
        except FileNotFoundError:
            logger.debug("Page file missing: %s", path)
            return PageAbsent(title=title)
        except OSError as e:
            logger.warning("Page file unreadable: %s (%s)", path, e)
            return PageUnreadable(title=title, error=str(e))
        logger.debug("Loaded page %s (%d bytes)", title, len(body))
        return PageFound(page=Page(title=title, body=body))

    def load(self, title: str) -> Page:
        """Return the stored page; missing and unreadable files both raise PageNotFoundError."""
        result = self.lookup(title)
        if isinstance(result, PageFound):
            return result.page
        raise PageNotFoundError(title)

    def save(self, page: Page) -> None:
        """Create or truncate <title>.txt with the page body. Not atomic."""
        path = self.path_for(page.title)
        try:
            self._root.mkdir(parents=True, exist_ok=True)
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, PAGE_FILE_MODE)
            with os.fdopen(fd, "wb") as fh:
                fh.write(page.body)
        except OSError as e:
            logger.exception("Failed to save page %s to %s", page.title, path)
            raise PageSaveError(page.title, str(e)) from e
        logger.info("Saved page %s (%d bytes)", page.title, len(page.body))
