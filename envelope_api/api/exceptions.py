"""Custom exception classes for the API.

Raising one of these from a route produces an error envelope carrying the
exception's message, application code and HTTP status.
"""

from http import HTTPStatus


class ApiError(Exception):
    """Base exception for application-level API errors."""

    def __init__(
        self,
        message: str,
        code: int = HTTPStatus.INTERNAL_SERVER_ERROR,
        status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR,
    ):
        self.message = message
        self.code = int(code)
        self.status_code = int(status_code)
        super().__init__(message)


class BadRequestError(ApiError):
    """Raised when the request is well-formed but cannot be processed."""

    def __init__(self, message: str, code: int = HTTPStatus.BAD_REQUEST):
        super().__init__(message, code=code, status_code=HTTPStatus.BAD_REQUEST)


class NotFoundError(ApiError):
    """Raised when a requested resource does not exist."""

    def __init__(self, message: str, code: int = HTTPStatus.NOT_FOUND):
        super().__init__(message, code=code, status_code=HTTPStatus.NOT_FOUND)
