"""Core type definitions."""

from typing import NewType, NotRequired, TypedDict

# Link target of a sitemap entry (e.g., "/", "/guide/intro.html", "https://...")
URLPath = NewType("URLPath", str)


class PageInfo(TypedDict):
    """Flat page record supplied by a documentation source scanner.

    ``path`` is relative to the site root and ``/``-delimited; every segment
    before the last one names an ancestor directory.
    """

    path: str
    url: URLPath
    title: NotRequired[str | None]
    current: NotRequired[bool]


class CustomLink(TypedDict, total=False):
    """Manually configured navigation entry.

    Either ``url`` (a leaf link) or ``pages`` (a group of links) is expected.
    """

    title: str
    url: URLPath
    pages: list["CustomLink"]
