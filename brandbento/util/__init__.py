"""Small shared helpers (console output, observability switch)."""
