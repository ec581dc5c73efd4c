"""Small utilities: text processing, caching, concurrency, files, environment and validation."""

__version__ = "0.1.0"