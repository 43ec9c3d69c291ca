"""Helpers for release tooling: file search, chunking, checksums and deployment metadata."""

__version__ = "0.1.0"