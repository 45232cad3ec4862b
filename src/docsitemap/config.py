"""Configuration management for Docsitemap.

Supports TOML configuration format with auto-discovery.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from docsitemap.core.types import CustomLink, URLPath

CONFIG_FILENAME = "docsitemap.toml"

DEFAULT_SITE_TITLE = "Documentation"


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class SiteConfig:
    """Site configuration."""

    title: str = DEFAULT_SITE_TITLE


@dataclass
class SitemapConfig:
    """Sitemap configuration."""

    pages_file: Path = field(default_factory=lambda: Path("pages.json"))
    links: list[CustomLink] = field(default_factory=list)


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig
    site: SiteConfig
    sitemap: SitemapConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for docsitemap.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents."""
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> Config:
        """Create config with all defaults."""
        return cls(
            server=ServerConfig(),
            site=SiteConfig(),
            sitemap=SitemapConfig(),
        )

    @classmethod
    def _load_from_file(cls, path: Path) -> Config:
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {path}: {e}") from e

        config_dir = path.parent

        return cls(
            server=cls._parse_server(data.get("server")),
            site=cls._parse_site(data.get("site")),
            sitemap=cls._parse_sitemap(data.get("sitemap"), config_dir),
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        """Parse server configuration section."""
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_site(cls, data: object) -> SiteConfig:
        """Parse site configuration section."""
        if data is None:
            return SiteConfig()

        if not isinstance(data, dict):
            raise ValueError("site section must be a dictionary")

        title = data.get("title", DEFAULT_SITE_TITLE)
        if not isinstance(title, str):
            raise ValueError("site.title must be a string")

        return SiteConfig(title=title)

    @classmethod
    def _parse_sitemap(cls, data: object, config_dir: Path) -> SitemapConfig:
        """Parse sitemap configuration section.

        Args:
            data: Raw sitemap section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            SitemapConfig instance
        """
        if data is None:
            return SitemapConfig(pages_file=config_dir / "pages.json")

        if not isinstance(data, dict):
            raise ValueError("sitemap section must be a dictionary")

        pages_file = data.get("pages_file", "pages.json")
        if not isinstance(pages_file, str):
            raise ValueError("sitemap.pages_file must be a string")

        links = cls._parse_links(data.get("links", []), "sitemap.links")

        return SitemapConfig(pages_file=config_dir / pages_file, links=links)

    @classmethod
    def _parse_links(cls, data: object, key: str) -> list[CustomLink]:
        """Parse a list of custom links, recursing into link groups.

        Only types are checked here. Entries with neither url nor pages are
        kept and skipped later when the sitemap is built.

        Args:
            data: Raw list of link tables
            key: Dotted config key used in error messages

        Returns:
            Custom links in config order
        """
        if not isinstance(data, list):
            raise ValueError(f"{key} must be a list")

        links: list[CustomLink] = []
        for i, item in enumerate(data):
            item_key = f"{key}[{i}]"
            if not isinstance(item, dict):
                raise ValueError(f"{item_key} must be a dictionary")

            title = item.get("title")
            if not isinstance(title, str):
                raise ValueError(f"{item_key}.title must be a string")
            link: CustomLink = {"title": title}

            url = item.get("url")
            if url is not None:
                if not isinstance(url, str):
                    raise ValueError(f"{item_key}.url must be a string")
                link["url"] = URLPath(url)

            pages = item.get("pages")
            if pages is not None:
                link["pages"] = cls._parse_links(pages, f"{item_key}.pages")

            links.append(link)

        return links

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        site_title: str | None = None,
        pages_file: Path | None = None,
    ) -> Config:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            site_title: Override site.title
            pages_file: Override sitemap.pages_file

        Returns:
            New Config instance with overrides applied
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        site = self.site
        if site_title is not None:
            site = replace(self.site, title=site_title)

        sitemap = self.sitemap
        if pages_file is not None:
            sitemap = replace(self.sitemap, pages_file=pages_file)

        return replace(self, server=server, site=site, sitemap=sitemap)
