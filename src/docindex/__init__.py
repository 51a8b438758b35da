"""docindex - build a lunr search index from a documentation tree."""

__version__ = "0.1.0"
