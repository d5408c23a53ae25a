"""Exceptions raised by the carver package."""


class CarverError(Exception):
    """Base class for errors raised on purpose by carver."""


class InvalidImageError(CarverError, ValueError):
    """Malformed pixel grid, energy field, seam or pass count."""


class ImageIOError(CarverError, OSError):
    """An image could not be decoded from or encoded to disk."""
