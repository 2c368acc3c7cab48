"""Registry operations built on the request executor."""
