"""Response envelope helpers for consistent API responses.

Every response body has the shape ``{"code": int, "data"?: T, "msg"?: str}``.
``data`` and ``msg`` are left out entirely when they were never set, so
clients can rely on key presence rather than null checks.
"""

import logging
from http import HTTPStatus
from typing import Any, Generic, TypeVar

from fastapi.responses import Response
from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    ValidationError,
    model_serializer,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

JSON_CONTENT_TYPE = "application/json; charset=utf-8"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"

SUCCESS_CODE = 200
ERROR_CODE = 500
SUCCESS_MESSAGE = "success"


class ResResult(BaseModel, Generic[T]):
    """Standard API response envelope."""

    model_config = ConfigDict(frozen=True)

    code: int = 0
    data: T | None = None
    message: str | None = Field(
        default=None,
        validation_alias=AliasChoices("message", "msg"),
        serialization_alias="msg",
    )

    @model_serializer(mode="wrap")
    def _omit_unset(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        # Omission follows presence, not null-ness: data=None passed
        # explicitly still renders as "data": null.
        rendered = handler(self)
        if "data" not in self.model_fields_set:
            rendered.pop("data", None)
        if "message" not in self.model_fields_set:
            rendered.pop("msg", None)
            rendered.pop("message", None)
        return rendered

    def to_json(self) -> str:
        """Serialize the envelope to compact JSON using the wire key names."""
        return self.model_dump_json(by_alias=True)

    def into_response(self, status_code: int | HTTPStatus = HTTPStatus.OK) -> Response:
        """Render the envelope as a JSON response.

        If the envelope cannot be serialized, the intended status and body are
        dropped and a plain-text 500 describing the failure is returned
        instead. Serialization problems never escape this method.
        """
        try:
            body = self.to_json()
        except Exception as e:
            logger.exception(f"Failed to serialize response envelope (code={self.code})")
            return _failure_response(e)

        return Response(
            content=body,
            status_code=int(status_code),
            media_type=JSON_CONTENT_TYPE,
        )

    @classmethod
    def _respond(cls, status_code: int | HTTPStatus, **fields: Any) -> Response:
        # A typed envelope (e.g. ResResult[Item]) validates its payload here;
        # a payload that does not fit T gets the same plain-text 500.
        try:
            envelope = cls(**fields)
        except ValidationError as e:
            logger.exception(f"Failed to build response envelope (code={fields.get('code')})")
            return _failure_response(e)
        return envelope.into_response(status_code)

    @classmethod
    def with_success(cls, data: Any) -> Response:
        """Create a 200 success response carrying ``data``."""
        return cls._respond(HTTPStatus.OK, code=SUCCESS_CODE, data=data, message=SUCCESS_MESSAGE)

    @classmethod
    def with_success_msg(cls, data: Any, msg: str) -> Response:
        """Create a 200 success response with a custom message."""
        return cls._respond(HTTPStatus.OK, code=SUCCESS_CODE, data=data, message=msg)

    @classmethod
    def with_error(cls, err: str) -> Response:
        """Create a 500 error response. No ``data`` key is emitted."""
        return cls._respond(HTTPStatus.INTERNAL_SERVER_ERROR, code=ERROR_CODE, message=err)

    @classmethod
    def with_error_code(
        cls, err: str, code: int, status_code: int | HTTPStatus
    ) -> Response:
        """Create an error response with an application code and HTTP status.

        ``code`` is the application-level result code and may differ from
        the HTTP status, e.g. ``with_error_code("bad request", 4001, 400)``.
        """
        return cls._respond(status_code, code=code, message=err)


def _failure_response(exc: Exception) -> Response:
    return Response(
        content=str(exc) or type(exc).__name__,
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        media_type=TEXT_CONTENT_TYPE,
    )


def success_response(data: Any, msg: str | None = None) -> Response:
    """Create a success response envelope."""
    if msg is None:
        return ResResult.with_success(data)
    return ResResult.with_success_msg(data, msg)


def error_response(
    message: str, code: int | None = None, status_code: int | HTTPStatus | None = None
) -> Response:
    """Create an error response envelope.

    Without ``code`` and ``status_code`` this is a plain 500. A missing
    ``status_code`` defaults to ``code`` when that is a valid HTTP status.
    """
    if code is None and status_code is None:
        return ResResult.with_error(message)
    if code is None:
        code = int(status_code)
    if status_code is None:
        status_code = code if 100 <= code <= 599 else HTTPStatus.INTERNAL_SERVER_ERROR
    return ResResult.with_error_code(message, code, status_code)
