"""taskboard: in-memory task management API."""
