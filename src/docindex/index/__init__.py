"""Search index construction."""
