"""Sitemap tree builder.

Folds a flat list of documentation pages into a tree mirroring the source
directory hierarchy, then appends manually configured custom links.
"""

import logging
import re
from collections.abc import Sequence

from docsitemap.core.names import get_sitemap_name
from docsitemap.core.nodes import (
    DirNode,
    PageNode,
    SitemapNode,
    SitemapPage,
    create_page_node,
)
from docsitemap.core.types import CustomLink, PageInfo, URLPath

logger = logging.getLogger(__name__)

# Root pages are named index or README and are Markdown or HTML files
ROOT_PAGE_PATTERN = re.compile(r"(index|readme)\.(md|htm|html)")

ASSETS_PREFIX = "assets"


def is_root_page(path: str) -> bool:
    """Check whether a page path designates the site root."""
    return ROOT_PAGE_PATTERN.fullmatch(path.lower()) is not None


def is_asset_path(path: str) -> bool:
    """Check whether a page path points at a non-content resource."""
    return path.startswith(ASSETS_PREFIX)


def unflatten_sitemap_tree(
    pages: Sequence[PageInfo],
    custom_links: Sequence[CustomLink],
    site_title: str,
    *,
    diagnostics: logging.Logger | None = None,
) -> PageNode | None:
    """Convert a flat list of pages into a sitemap tree.

    The first page whose path matches ``ROOT_PAGE_PATTERN`` becomes the root
    node. Asset paths are dropped, every other page is inserted by path, and
    custom links are appended after all of them.

    Args:
        pages: Flat page records; one of them must be the root page
        custom_links: Configured custom links, appended in order
        site_title: Root page name used when the root has no title
        diagnostics: Logger for recoverable anomalies (default: module logger)

    Returns:
        Root page node, or None if there is no root page or no page besides it
    """
    log = diagnostics or logger

    root_index = next(
        (i for i, page_info in enumerate(pages) if is_root_page(page_info["path"])),
        None,
    )
    if root_index is None:
        log.debug("unflatten_sitemap_tree: Root page not provided")
        return None

    root_info = pages[root_index]
    remaining = [
        page_info
        for i, page_info in enumerate(pages)
        if i != root_index and not is_asset_path(page_info["path"])
    ]

    # Root page alone: no sitemap
    if not remaining:
        return None

    root = PageNode(
        page=SitemapPage(
            name=root_info.get("title") or site_title,
            url=root_info["url"],
            current=bool(root_info.get("current")),
        ),
    )

    for page_info in remaining:
        add_path_to_node(
            page_info["path"],
            page_info["url"],
            page_info.get("title"),
            page_info.get("current"),
            root,
        )

    for item in custom_links:
        add_custom_link_to_node(item, root, diagnostics=log)

    return root


def add_path_to_node(
    path: str,
    url: URLPath,
    title: str | None,
    current: bool | None,
    node: SitemapNode,
) -> None:
    """Insert a page into the subtree rooted at ``node``.

    Leading path segments become directory nodes. A directory key that
    already exists among the node's children is reused, so pages sharing a
    prefix end up under a single directory.

    Args:
        path: Page path relative to ``node``
        url: Page URL
        title: Explicit page title; derived from the file name when empty
        current: Whether this is the page being viewed
        node: Node to insert into (mutated)
    """
    dir, sep, rest_of_path = path.partition("/")
    if not sep:
        name = title or get_sitemap_name(path)
        node.child_pages.append(create_page_node(name, url, bool(current)))
        return

    existing = node.find_dir(dir)
    if existing is not None:
        add_path_to_node(rest_of_path, url, title, current, existing)
        return

    new_dir = DirNode(dir=dir, title=get_sitemap_name(dir))
    add_path_to_node(rest_of_path, url, title, current, new_dir)
    node.child_dirs.append(new_dir)


def add_custom_link_to_node(
    item: CustomLink,
    node: SitemapNode,
    *,
    diagnostics: logging.Logger | None = None,
) -> None:
    """Insert a custom link (or link group) into ``node``.

    Link groups always create a new directory keyed by their title; they
    are never merged with an existing sibling.

    Args:
        item: Custom link with either ``url`` or ``pages``
        node: Node to insert into (mutated)
        diagnostics: Logger for incomplete items (default: module logger)
    """
    log = diagnostics or logger
    title = item.get("title", "")
    url = item.get("url")
    pages = item.get("pages")

    if url:
        node.child_pages.append(create_page_node(title, url, False, True))
    elif pages is not None:
        group = DirNode(dir=title, title=title)
        for child in pages:
            add_custom_link_to_node(child, group, diagnostics=log)
        node.child_dirs.append(group)
    else:
        log.debug(
            f"add_custom_link_to_node: Received incomplete item with title {title!r}",
        )
