"""Shared JSON plumbing for the Flask controllers.

Every error leaves the API in the same shape::

    {"error": "...", "code": "VALIDATION_ERROR", "details": ["field: message"]}
"""

from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Mapping, Type, TypeVar

import pydantic
from flask import Flask, jsonify, session
from pydantic import BaseModel
from werkzeug.exceptions import HTTPException

from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    code: str
    details: list[str] = []


class ErrorCodes:
    """Error code constants."""

    INVALID_REQUEST = "INVALID_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    NOT_FOUND = "NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


def error_response(message: str, code: str, status: int, details: list[str] | None = None):
    body = ErrorResponse(error=message, code=code, details=details or [])
    return jsonify(body.model_dump()), status


def parse_model(schema: Type[SchemaT], data: Mapping[str, Any] | None) -> SchemaT:
    """Validate a request payload once, at the boundary.

    pydantic errors are turned into the domain ValidationError with one
    detail line per failing field.
    """
    try:
        return schema.model_validate(dict(data or {}))
    except pydantic.ValidationError as e:
        details = []
        for err in e.errors():
            loc = ".".join(str(p) for p in err.get("loc", ())) or "body"
            details.append(f"{loc}: {err.get('msg')}")
        raise ValidationError("Invalid request data", details) from e


def login_required(view):
    """Reject requests without a logged-in session (401 JSON)."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            raise AuthenticationError("Not authenticated")
        return view(*args, **kwargs)

    return wrapper


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation_error(e: ValidationError):
        return error_response(str(e), ErrorCodes.VALIDATION_ERROR, 400, e.details)

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return error_response(str(e), ErrorCodes.NOT_FOUND, 404)

    @app.errorhandler(AuthenticationError)
    def _unauthenticated(e: AuthenticationError):
        return error_response(str(e), ErrorCodes.UNAUTHORIZED, 401)

    @app.errorhandler(HTTPException)
    def _http_error(e: HTTPException):
        code = ErrorCodes.NOT_FOUND if e.code == 404 else ErrorCodes.INVALID_REQUEST
        return error_response(e.description or e.name, code, e.code or 500)

    @app.errorhandler(Exception)
    def _unexpected(e: Exception):
        logger.exception("Unhandled error")
        return error_response("Internal server error", ErrorCodes.INTERNAL_ERROR, 500)
