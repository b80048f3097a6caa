"""Million Dollar Journey: net-worth projection engine and HTTP API."""

__version__ = "0.1.0"
