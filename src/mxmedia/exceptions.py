"""
Custom exceptions for mxmedia.

All mxmedia exceptions inherit from MxMediaError for easy catching.

These are plain Exception subclasses (not ValueError) so that they pass
through pydantic validation unchanged when raised while building a
MediaURL.
"""

from __future__ import annotations


class MxMediaError(Exception):
    """Base exception for all mxmedia errors."""

    pass


class InvalidURLError(MxMediaError):
    """Input cannot be parsed as an absolute URL.

    Attributes:
        value: The rejected input
    """

    def __init__(self, value: str, message: str | None = None):
        self.value = value
        super().__init__(message or f"Invalid URL: {value!r}")


class UnsupportedProtocolError(MxMediaError):
    """URL protocol is not one of http, https or file.

    Attributes:
        protocol: The rejected scheme, without the trailing colon
    """

    def __init__(self, protocol: str, message: str | None = None):
        self.protocol = protocol
        super().__init__(message or f"Unsupported protocol: {protocol}:")


class UnknownMediaTypeError(MxMediaError):
    """File extension is not a known audio/video extension."""

    def __init__(self, extension: str):
        self.extension = extension
        super().__init__(f"Unknown media type {extension}")


class ConfigError(MxMediaError):
    """Invalid configuration value."""

    pass
