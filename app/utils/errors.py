# app/utils/errors.py
"""
Uniform API errors.

Every failure surfaced to a client is an ``ApiError`` carrying an HTTP status
code and a message; ``app.main`` renders them as ``{"code": ..., "message": ...}``.
"""
from http import HTTPStatus


class ApiError(Exception):
    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str | None = None, status_code: int | None = None):
        if status_code is not None:
            self.status_code = status_code
        self.message = message or HTTPStatus(self.status_code).phrase
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"code": int(self.status_code), "message": self.message}


class BadRequestError(ApiError):
    status_code = HTTPStatus.BAD_REQUEST


class UnauthorizedError(ApiError):
    status_code = HTTPStatus.UNAUTHORIZED


class ForbiddenError(ApiError):
    status_code = HTTPStatus.FORBIDDEN


class NotFoundError(ApiError):
    status_code = HTTPStatus.NOT_FOUND


class InternalServerError(ApiError):
    status_code = HTTPStatus.INTERNAL_SERVER_ERROR
