"""Utility helpers for the extension resolver."""

from .properties import parse_properties, split_by_whitespace

__all__ = ["parse_properties", "split_by_whitespace"]
