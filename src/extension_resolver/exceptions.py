"""
Custom exception classes for the extension resolver.

This module defines structured exception types for coordinate parsing,
descriptor fetching and parsing, settings loading and per-artifact
resolution failures. "No descriptor" is never an exception.
"""


class ResolverError(Exception):
    """Base exception for all extension resolver errors."""
    pass


class CoordinateFormatError(ResolverError, ValueError):
    """Malformed artifact coordinate or artifact key string."""

    def __init__(self, value: str, message: str):
        self.value = value
        self.message = message
        super().__init__(f"Invalid coordinate '{value}': {message}")


class DescriptorFetchError(ResolverError):
    """An existing artifact location could not be read."""

    def __init__(self, path, message: str):
        self.path = path
        self.message = message
        super().__init__(f"Failed to read {path}: {message}")


class DescriptorParseError(ResolverError):
    """Extension descriptor content could not be turned into a descriptor."""

    def __init__(self, source: str, message: str):
        self.source = source
        self.message = message
        super().__init__(f"Error parsing descriptor of {source}: {message}")


class SettingsLoadError(ResolverError):
    """Error loading the resolver settings file."""

    def __init__(self, file_name: str, message: str):
        self.file_name = file_name
        self.message = message
        super().__init__(f"Error loading {file_name}: {message}")


class ExtensionResolutionError(ResolverError):
    """Resolution of a single artifact failed."""

    def __init__(self, coords, cause: Exception):
        self.coords = coords
        self.cause = cause
        super().__init__(f"Failed to resolve extension info of {coords}: {cause}")
