"""HTTP client with a chainable request builder, threaded request running and cookie parsing."""

__version__ = "1.0.0"
__all__ = ["builder", "cli", "cookies", "factory", "response", "status", "utils"]