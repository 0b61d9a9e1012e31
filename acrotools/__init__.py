"""Checksums, logging, test-site layout, path and file helpers for device programmer test stations."""

__version__ = "0.1.0"