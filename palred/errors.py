from typing import Optional


class ColorReducerError(Exception):
    """Base class for every error raised by the palred package."""


class DecodeError(ColorReducerError):
    """An image could not be read or decoded."""

    def __init__(self, path, code: str, message: str):
        self.path = path
        self.code = code  # "not_found", "unidentified" or "io"
        self.message = message
        super().__init__(f"Cannot open {path} file ({code}): {message}")


class EncodeError(ColorReducerError):
    """An image could not be written."""

    def __init__(self, path, message: str):
        self.path = path
        self.message = message
        super().__init__(f"Cannot save {path} file: {message}")


class MalformedBufferError(ColorReducerError, ValueError):
    """Raw pixel data does not describe whole RGBA pixels."""

    def __init__(self, message: str, length: Optional[int] = None):
        self.length = length
        super().__init__(message)


class InvalidColorCountError(ColorReducerError, ValueError):
    """A maximum color count below zero."""
