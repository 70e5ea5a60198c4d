# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error response uses the failure result shape:
#   {"result": "failure", "message": "..."}
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.models.result import Failure

logger = logging.getLogger(__name__)


class PeopleDbException(Exception):
    """
    Base exception for the PeopleDb API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "PEOPLEDB_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a failure result dict."""
        return Failure(self.message).to_json()


# =============================================================================
# Person Exceptions
# =============================================================================

class PersonNotFoundError(PeopleDbException):
    """Raised when a person ID doesn't exist in the store."""

    def __init__(self, person_id: int):
        super().__init__(
            message="Person not found.",
            code="PERSON_NOT_FOUND",
            status_code=404,
            suggestion="Check that the person id is correct and the person hasn't been deleted",
            details={"person_id": person_id}
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def peopledb_exception_handler(
    request: Request,
    exc: PeopleDbException
) -> JSONResponse:
    """Convert PeopleDbException to a failure JSON response."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """
    Handle framework HTTP errors.

    Unknown routes (404) and unsupported methods (405) keep their status
    and headers but use the failure result shape.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=Failure(str(exc.detail)).to_json(),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors.

    Malformed JSON bodies, missing fields, unparseable dates and
    non-integer ids all end up here as a generic bad request.
    """
    logger.info(f"Rejected {request.method} {request.url.path}: {len(exc.errors())} validation error(s)")
    content = Failure("Invalid request.").to_json()
    content["errors"] = jsonable_encoder(exc.errors())
    return JSONResponse(
        status_code=400,
        content=content
    )
