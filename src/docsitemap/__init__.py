"""Docsitemap - sitemap navigation trees for documentation sites.

Turns a flat list of page paths into a nested tree of pages and
directories, with custom links spliced in.
"""

from .core.names import get_sitemap_name
from .core.nodes import DirNode, PageNode, SitemapPage
from .core.sitemap import unflatten_sitemap_tree

__all__ = [
    "DirNode",
    "PageNode",
    "SitemapPage",
    "get_sitemap_name",
    "unflatten_sitemap_tree",
]
