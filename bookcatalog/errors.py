"""Errors raised by the catalog and the HTTP status each one maps to."""


class CatalogError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(CatalogError):
    """A required field is missing or blank."""

    status_code = 400
    default_message = "Title and Author are required"


class NotFoundError(CatalogError):
    """No book exists with the requested id."""

    status_code = 404
    default_message = "Book not found"


class StorageError(CatalogError):
    """The storage engine failed. The message is the engine's own text."""

    status_code = 500
    default_message = "Storage error"
