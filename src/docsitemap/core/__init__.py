"""Pure sitemap tree construction."""
