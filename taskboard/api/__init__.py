"""HTTP layer for taskboard."""
