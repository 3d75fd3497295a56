"""External services called over HTTP."""
