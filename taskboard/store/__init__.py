"""Task storage for taskboard."""
