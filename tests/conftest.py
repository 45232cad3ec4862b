"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
from docsitemap.config import Config, ServerConfig, SiteConfig, SitemapConfig
from docsitemap.core.types import PageInfo


@pytest.fixture
def sample_pages() -> list[PageInfo]:
    """Create a small documentation site with nested directories."""
    return [
        {"path": "index.md", "url": "/", "title": "Home"},
        {"path": "getting-started.md", "url": "/getting-started"},
        {"path": "guide/intro.md", "url": "/guide/intro"},
        {"path": "guide/advanced/plugins.md", "url": "/guide/advanced/plugins"},
        {"path": "guide/setup.md", "url": "/guide/setup", "title": "Installing"},
        {"path": "assets/logo.png", "url": "/assets/logo.png"},
    ]


@pytest.fixture
def pages_file(tmp_path: Path, sample_pages: list[PageInfo]) -> Path:
    """Write sample pages to a JSON manifest."""
    path = tmp_path / "pages.json"
    path.write_text(json.dumps(sample_pages))
    return path


@pytest.fixture
def test_config(pages_file: Path) -> Config:
    """Create a test configuration pointing at the sample manifest."""
    return Config(
        server=ServerConfig(),
        site=SiteConfig(title="Test Docs"),
        sitemap=SitemapConfig(
            pages_file=pages_file,
            links=[
                {"title": "GitHub", "url": "https://github.com/example/docs"},
            ],
        ),
    )
