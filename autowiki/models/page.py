"""Page model."""

import re
from dataclasses import dataclass

# Titles double as filename stems, so only plain alphanumerics are allowed.
TITLE_PATTERN = re.compile(r"^[a-zA-Z0-9]+$")


def is_valid_title(title: str) -> bool:
    return bool(TITLE_PATTERN.fullmatch(title))


@dataclass(frozen=True)
class Page:
    """A wiki page: its title and the raw bytes stored on disk."""

    title: str
    body: bytes = b""

    @classmethod
    def empty(cls, title: str) -> "Page":
        return cls(title=title, body=b"")

    @property
    def text(self) -> str:
        """Body decoded for rendering; undecodable bytes are replaced."""
        return self.body.decode("utf-8", errors="replace")

    def __repr__(self) -> str:
        return f"<Page {self.title!r} {len(self.body)} bytes>"
