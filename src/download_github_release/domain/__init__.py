"""Domain types for release downloads."""
