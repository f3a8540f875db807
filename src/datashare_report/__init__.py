"""Usage reporting for Azure Data Share accounts."""

__version__ = "0.1.0"
