"""Sitemap API endpoint.

Builds the sitemap tree from the page manifest on every request, so manifest
regenerations are picked up without restarting the server.
"""

import logging

from aiohttp import web

from docsitemap.app_keys import config_key
from docsitemap.core.sitemap import unflatten_sitemap_tree
from docsitemap.manifest import load_pages, mark_current

logger = logging.getLogger(__name__)


def create_sitemap_routes() -> list[web.RouteDef]:
    return [web.get("/api/sitemap", get_sitemap)]


async def get_sitemap(request: web.Request) -> web.Response:
    config = request.app[config_key]
    pages_file = config.sitemap.pages_file

    try:
        pages = load_pages(pages_file)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Failed to load page manifest: {e}")
        return web.json_response(
            {"error": str(e), "path": str(pages_file)},
            status=500,
        )

    current = request.query.get("current")
    if current is not None:
        pages = mark_current(pages, current)

    root = unflatten_sitemap_tree(pages, config.sitemap.links, config.site.title)
    return web.json_response({"root": root.to_dict() if root else None})
