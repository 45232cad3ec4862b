"""Tests for configuration loading."""

from pathlib import Path
from unittest.mock import patch

import pytest
from docsitemap.config import Config, ServerConfig, SiteConfig, SitemapConfig


class TestConfigLoad:
    """Tests for Config.load()."""

    def test__explicit_path__loads_config(self, tmp_path: Path) -> None:
        """Load config from explicit path."""
        config_file = tmp_path / "docsitemap.toml"
        config_file.write_text("""
[server]
host = "0.0.0.0"
port = 3000

[site]
title = "Project Docs"

[sitemap]
pages_file = "build/pages.json"

[[sitemap.links]]
title = "GitHub"
url = "https://github.com/example/project"

[[sitemap.links]]
title = "Resources"

[[sitemap.links.pages]]
title = "Blog"
url = "https://blog.example.com"
""")

        config = Config.load(config_file)

        assert config.server.host == "0.0.0.0"
        assert config.server.port == 3000
        assert config.site.title == "Project Docs"
        assert config.sitemap.pages_file == tmp_path / "build/pages.json"
        assert config.sitemap.links == [
            {"title": "GitHub", "url": "https://github.com/example/project"},
            {
                "title": "Resources",
                "pages": [{"title": "Blog", "url": "https://blog.example.com"}],
            },
        ]
        assert config.config_path == config_file

    def test__minimal_config__uses_defaults(self, tmp_path: Path) -> None:
        """Load minimal config with defaults relative to config file."""
        config_file = tmp_path / "docsitemap.toml"
        config_file.write_text("")

        config = Config.load(config_file)

        assert config.server.host == "127.0.0.1"
        assert config.server.port == 8080
        assert config.site.title == "Documentation"
        assert config.sitemap.pages_file == tmp_path / "pages.json"
        assert config.sitemap.links == []

    def test__incomplete_link__kept(self, tmp_path: Path) -> None:
        """Keep links without url or pages for the builder to skip."""
        config_file = tmp_path / "docsitemap.toml"
        config_file.write_text('[[sitemap.links]]\ntitle = "Later"\n')

        config = Config.load(config_file)

        assert config.sitemap.links == [{"title": "Later"}]

    def test__missing_explicit_path__raises_error(self, tmp_path: Path) -> None:
        """Raise FileNotFoundError for missing explicit config file."""
        config_file = tmp_path / "nonexistent.toml"

        with pytest.raises(FileNotFoundError, match="Configuration file not found"):
            Config.load(config_file)

    def test__no_path_no_discovery__returns_defaults(self) -> None:
        """Return defaults when no config file found."""
        with patch.object(Config, "_discover_config", return_value=None):
            config = Config.load()

        assert config.site.title == "Documentation"
        assert config.sitemap.pages_file == Path("pages.json")
        assert config.config_path is None

    def test__invalid_toml__raises_error(self, tmp_path: Path) -> None:
        """Raise ValueError for malformed TOML."""
        config_file = tmp_path / "docsitemap.toml"
        config_file.write_text("[site\n")

        with pytest.raises(ValueError, match="Invalid TOML"):
            Config.load(config_file)


class TestConfigDiscovery:
    """Tests for config file discovery."""

    def test__config_in_current_dir__found(self, tmp_path: Path) -> None:
        """Find config in current directory."""
        config_file = tmp_path / "docsitemap.toml"
        config_file.write_text("[server]\nport = 9000")

        with patch("pathlib.Path.cwd", return_value=tmp_path):
            discovered = Config._discover_config()

        assert discovered == config_file

    def test__config_in_parent_dir__found(self, tmp_path: Path) -> None:
        """Find config in parent directory."""
        config_file = tmp_path / "docsitemap.toml"
        config_file.write_text("[server]\nport = 9000")
        child = tmp_path / "sub" / "dir"
        child.mkdir(parents=True)

        with patch("pathlib.Path.cwd", return_value=child):
            discovered = Config._discover_config()

        assert discovered == config_file


class TestConfigValidation:
    """Tests for configuration type checks."""

    @pytest.mark.parametrize(
        ("content", "message"),
        [
            ('server = "x"', "server section must be a dictionary"),
            ('[server]\nhost = 1', "server.host must be a string"),
            ('[server]\nport = "80"', "server.port must be an integer"),
            ("site = 1", "site section must be a dictionary"),
            ("[site]\ntitle = 1", "site.title must be a string"),
            ("sitemap = 1", "sitemap section must be a dictionary"),
            ("[sitemap]\npages_file = 1", "sitemap.pages_file must be a string"),
            ('[sitemap]\nlinks = "x"', "sitemap.links must be a list"),
            ("[sitemap]\nlinks = [1]", r"sitemap.links\[0\] must be a dictionary"),
            (
                "[[sitemap.links]]\nurl = \"/x\"",
                r"sitemap.links\[0\].title must be a string",
            ),
            (
                "[[sitemap.links]]\ntitle = \"X\"\nurl = 1",
                r"sitemap.links\[0\].url must be a string",
            ),
            (
                "[[sitemap.links]]\ntitle = \"X\"\npages = [1]",
                r"sitemap.links\[0\].pages\[0\] must be a dictionary",
            ),
        ],
    )
    def test__invalid_values__raise_error(
        self,
        tmp_path: Path,
        content: str,
        message: str,
    ) -> None:
        """Raise ValueError naming the offending key."""
        config_file = tmp_path / "docsitemap.toml"
        config_file.write_text(content)

        with pytest.raises(ValueError, match=message):
            Config.load(config_file)


class TestConfigOverrides:
    """Tests for Config.with_overrides()."""

    def test__overrides__applied_without_mutation(self) -> None:
        """Apply non-None overrides and keep the original intact."""
        config = Config(
            server=ServerConfig(),
            site=SiteConfig(),
            sitemap=SitemapConfig(),
        )

        result = config.with_overrides(
            port=9000,
            site_title="Docs",
            pages_file=Path("out/pages.json"),
        )

        assert result.server.host == "127.0.0.1"
        assert result.server.port == 9000
        assert result.site.title == "Docs"
        assert result.sitemap.pages_file == Path("out/pages.json")
        assert config.server.port == 8080
        assert config.site.title == "Documentation"

    def test__no_overrides__returns_equal_config(self) -> None:
        """Return an equal config when nothing is overridden."""
        config = Config(
            server=ServerConfig(),
            site=SiteConfig(),
            sitemap=SitemapConfig(),
        )

        assert config.with_overrides() == config
