"""aiohttp server for Docsitemap.

Application factory and route registration for standalone server mode.
"""

from aiohttp import web

from docsitemap.api.config import create_config_routes
from docsitemap.api.sitemap import create_sitemap_routes
from docsitemap.app_keys import config_key
from docsitemap.config import Config


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application
    """
    app = web.Application()
    app[config_key] = config

    app.router.add_routes(create_config_routes())
    app.router.add_routes(create_sitemap_routes())

    return app


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
