"""Validated types for values in WinGet installer manifests."""

__version__ = "0.4.1"