"""
Custom exception classes for the pagination engine.

Every failure the engine can report is request-scoped: it is raised while
binding or validating pagination parameters, before any query runs, and
means the client sent a malformed request. None of them are retryable.
Each exception carries the HTTP status the outer API should answer with.
"""


class PaginationException(Exception):
    """
    Base exception class for all pagination exceptions.

    Attributes:
        message: Human-readable error message.
        http_status: HTTP status code for REST API responses.
    """

    http_status: int = 400

    def __init__(self, message: str):
        """
        Initialize the exception with a message.

        Args:
            message: Human-readable error description.
        """
        self.message = message
        super().__init__(message)


class BindingError(PaginationException):
    """
    Raw pagination parameters could not be bound.

    Raised for out-of-range or non-numeric values (page < 1, limit outside
    [1, 100], unparseable numbers).

    HTTP Status: 400 Bad Request
    """

    http_status = 400


class ValidationError(PaginationException):
    """
    Bound pagination parameters are semantically invalid.

    Raised for an unknown ordering token or an empty / malformed base URL.

    HTTP Status: 400 Bad Request
    """

    http_status = 400


class DecodeError(PaginationException):
    """
    A cursor token could not be decoded.

    HTTP Status: 400 Bad Request
    """

    http_status = 400
