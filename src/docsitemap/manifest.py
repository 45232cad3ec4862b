"""Page manifest loading.

A page manifest is the JSON file produced by whatever scans the
documentation sources. It is either a list of page records or an object
with a ``pages`` list:

    [
        {"path": "index.md", "url": "/", "title": "Home"},
        {"path": "guide/intro.md", "url": "/guide/intro.html"}
    ]
"""

import json
from pathlib import Path

from docsitemap.core.types import PageInfo, URLPath


def load_pages(path: Path) -> list[PageInfo]:
    """Load page records from a JSON manifest.

    Args:
        path: Path to manifest file

    Returns:
        Page records in file order

    Raises:
        FileNotFoundError: If the manifest doesn't exist
        ValueError: If the manifest can't be read, is not valid JSON or has
            invalid records
    """
    if not path.exists():
        raise FileNotFoundError(f"Page manifest not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ValueError(f"Cannot read page manifest {path}: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Page manifest is not valid JSON: {e}") from e

    return parse_pages(data)


def parse_pages(data: object) -> list[PageInfo]:
    """Validate decoded manifest data.

    Args:
        data: Decoded JSON (list of records or object with a "pages" list)

    Returns:
        Page records

    Raises:
        ValueError: If the structure or a record is invalid
    """
    if isinstance(data, dict):
        data = data.get("pages")

    if not isinstance(data, list):
        raise ValueError("Page manifest must be a list of pages")

    return [_parse_page(item, i) for i, item in enumerate(data)]


def _parse_page(data: object, index: int) -> PageInfo:
    """Validate a single page record."""
    if not isinstance(data, dict):
        raise ValueError(f"pages[{index}] must be a dictionary")

    path = data.get("path")
    if not isinstance(path, str):
        raise ValueError(f"pages[{index}].path must be a string")

    url = data.get("url")
    if not isinstance(url, str):
        raise ValueError(f"pages[{index}].url must be a string")

    page: PageInfo = {"path": path, "url": URLPath(url)}

    title = data.get("title")
    if title is not None:
        if not isinstance(title, str):
            raise ValueError(f"pages[{index}].title must be a string")
        page["title"] = title

    current = data.get("current")
    if current is not None:
        if not isinstance(current, bool):
            raise ValueError(f"pages[{index}].current must be a boolean")
        page["current"] = current

    return page


def mark_current(pages: list[PageInfo], url: str) -> list[PageInfo]:
    """Return copies of the pages with ``current`` set for the given URL."""
    return [{**page, "current": page["url"] == url} for page in pages]
