"""Generate a contributors list from a git repository's history."""
