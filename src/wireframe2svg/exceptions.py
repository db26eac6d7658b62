"""Custom exceptions for wireframe2svg."""


class Wireframe2svgError(Exception):
    """Base exception for wireframe2svg operations."""


class FetchError(Wireframe2svgError):
    """Error during remote content fetching."""


class PatternLibraryError(Wireframe2svgError):
    """Pattern library could not be read or is invalid."""


class StorageError(Wireframe2svgError):
    """Error while reading or writing stored documents."""


class DocumentNotFoundError(StorageError):
    """No document is stored under the requested identifier."""


class ExportError(Wireframe2svgError):
    """Error while writing an exported file."""
