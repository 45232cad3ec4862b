"""Sitemap tree nodes.

A sitemap tree is made of two node kinds: page nodes (the root and every
linked page) and directory nodes (groups of pages sharing a path prefix, or
custom link groups). Both carry ordered child pages and child directories.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum
from typing import ClassVar, NotRequired, TypedDict

from docsitemap.core.types import URLPath


class NodeKind(StrEnum):
    """Discriminator for sitemap nodes."""

    PAGE = "page"
    DIR = "dir"


class SitemapPageDict(TypedDict):
    """Dictionary representation of a sitemap page."""

    name: str
    url: str
    current: bool
    external: NotRequired[bool]


class PageNodeDict(TypedDict):
    """Dictionary representation of a page node."""

    type: str
    page: SitemapPageDict
    childPages: list[PageNodeDict]
    childDirs: list[DirNodeDict]


class DirNodeDict(TypedDict):
    """Dictionary representation of a directory node."""

    type: str
    dir: str
    title: str
    childPages: list[PageNodeDict]
    childDirs: list[DirNodeDict]


@dataclass
class SitemapPage:
    """Linkable page shown in the sitemap."""

    name: str
    url: URLPath
    current: bool = False
    external: bool | None = None

    def to_dict(self) -> SitemapPageDict:
        """Convert to dictionary for JSON serialization."""
        result: SitemapPageDict = {
            "name": self.name,
            "url": self.url,
            "current": self.current,
        }
        if self.external is not None:
            result["external"] = self.external
        return result


@dataclass
class _Children:
    """Ordered children shared by both node kinds."""

    child_pages: list[PageNode] = field(default_factory=list)
    child_dirs: list[DirNode] = field(default_factory=list)

    def find_dir(self, dir: str) -> DirNode | None:
        """Return the first child directory with the given key."""
        for child in self.child_dirs:
            if child.dir == dir:
                return child
        return None


@dataclass
class PageNode(_Children):
    """Page in the tree. The root of a sitemap is always a page node."""

    kind: ClassVar[NodeKind] = NodeKind.PAGE

    page: SitemapPage = field(kw_only=True)

    def to_dict(self) -> PageNodeDict:
        """Convert to dictionary for JSON serialization."""
        return {
            "type": self.kind.value,
            "page": self.page.to_dict(),
            "childPages": [child.to_dict() for child in self.child_pages],
            "childDirs": [child.to_dict() for child in self.child_dirs],
        }


@dataclass
class DirNode(_Children):
    """Directory grouping pages that share a path prefix.

    ``dir`` is the raw path segment and acts as the merge key; ``title`` is
    the display name.
    """

    kind: ClassVar[NodeKind] = NodeKind.DIR

    dir: str = field(kw_only=True)
    title: str = field(kw_only=True)

    def to_dict(self) -> DirNodeDict:
        """Convert to dictionary for JSON serialization."""
        return {
            "type": self.kind.value,
            "dir": self.dir,
            "title": self.title,
            "childPages": [child.to_dict() for child in self.child_pages],
            "childDirs": [child.to_dict() for child in self.child_dirs],
        }


SitemapNode = PageNode | DirNode


def create_page_node(
    name: str,
    url: URLPath,
    current: bool,
    external: bool | None = None,
) -> PageNode:
    """Create a page node with no children.

    Args:
        name: Display name
        url: Link target
        current: Whether this is the page being viewed
        external: Set only for custom links pointing at a direct URL

    Returns:
        New leaf page node
    """
    return PageNode(
        page=SitemapPage(name=name, url=url, current=current, external=external),
    )


def iter_pages(node: SitemapNode) -> Iterator[SitemapPage]:
    """Yield every page in the subtree, depth-first.

    At each level the node's own page comes first, then child pages, then
    the contents of child directories.
    """
    if isinstance(node, PageNode):
        yield node.page
    for child in node.child_pages:
        yield from iter_pages(child)
    for child_dir in node.child_dirs:
        yield from iter_pages(child_dir)
