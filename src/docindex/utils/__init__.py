"""Small filesystem and text helpers."""
