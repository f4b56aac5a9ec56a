"""Resolve stored content into signed delivery payloads."""

__version__ = "0.1.0"
