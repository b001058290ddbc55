"""Team roster service: greeting page plus Team/Player lookups."""

__version__ = "0.1.0"
