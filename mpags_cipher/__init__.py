"""Classical cipher engine with a concurrent chunked pipeline."""

__version__ = "0.5.0"
