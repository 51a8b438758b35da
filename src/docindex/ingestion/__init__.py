"""Document discovery and front-matter parsing."""
