"""Content carried by a drag and drop."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

__all__ = ["PasteboardContent", "make_pasteboard_content_with_urls"]


@dataclass
class PasteboardContent:
    """A list of URLs being dropped."""

    urls: list[str] = field(default_factory=list)

    def add_url(self, url: str) -> None:
        """Append a URL."""
        self.urls.append(url)

    def has_urls(self) -> bool:
        """Return whether any URL is present."""
        return bool(self.urls)


def make_pasteboard_content_with_urls(urls: Iterable[str]) -> PasteboardContent:
    """Build content holding the given URLs in order."""
    content = PasteboardContent()
    for url in urls:
        content.add_url(url)
    return content