"""errsync: sync an upstream ERRORS.md into the docs site's errors.json."""

__version__ = "0.1.0"
