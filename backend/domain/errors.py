"""
Error kinds raised by the stores and the dispatcher.

Each carries the HTTP status it maps to so the API layer can render it
without knowing which component raised it.
"""


class BookshelfError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgument(BookshelfError, ValueError):
    """Missing or malformed input."""
    status_code = 400


class NotFound(BookshelfError):
    """Unknown route or instance."""
    status_code = 404


class Internal(BookshelfError):
    """Unexpected failure in storage or a downstream call."""
    status_code = 500
