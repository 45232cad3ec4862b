"""Display names for sitemap entries derived from raw path segments."""

import re

_WORD_RUN = re.compile(r"[A-Za-z0-9_]\S*")
_SEPARATORS = re.compile(r"[-_]")


def get_sitemap_name(path_name: str) -> str:
    """Convert a file or directory name into a human-readable title.

    Drops the extension, turns hyphens and underscores into spaces and
    title-cases the result.

    Args:
        path_name: Raw path segment (e.g., "getting-started.md")

    Returns:
        Display name (e.g., "Getting Started")
    """
    stem, dot, _ = path_name.rpartition(".")
    if dot:
        path_name = stem

    return to_title_case(_SEPARATORS.sub(" ", path_name))


def to_title_case(text: str) -> str:
    """Capitalize each word run and lowercase the rest of it."""
    return _WORD_RUN.sub(lambda m: m[0][0].upper() + m[0][1:].lower(), text)
