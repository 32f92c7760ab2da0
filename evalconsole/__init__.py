"""Interactive evaluation sessions bound to captured execution contexts."""

__version__ = "0.1.0"
