"""Payment protocol helpers."""
