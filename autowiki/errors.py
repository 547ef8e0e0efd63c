"""Exceptions raised by the page store and services."""


class InvalidTitleError(ValueError):
    """Title is not a plain alphanumeric string and cannot name a page file."""

    def __init__(self, title: str):
        super().__init__(f"Invalid page title: {title!r}")
        self.title = title


class PageNotFoundError(LookupError):
    """Page file is missing or unreadable."""

    def __init__(self, title: str):
        super().__init__(f"Page not found: {title}")
        self.title = title


class PageSaveError(RuntimeError):
    """Writing a page file failed. The message is the underlying OS error."""

    def __init__(self, title: str, message: str):
        super().__init__(message)
        self.title = title
