"""
HTTP errors for the JSON API.
"""
from fastapi import HTTPException, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .engine import (
    ERROR_MESSAGES,
    MISSING_ALL_MESSAGE,
    MISSING_BOTH_MESSAGE,
    BmiOutcome,
    ErrorKind,
)

API_PREFIX = "/api/bmi/"

HEIGHT_FIELDS = ("height_cm", "height_feet", "height_inches")
WEIGHT_FIELDS = ("weight_kg",)


class BmiValidationError(HTTPException):
    """A calculation was rejected; carries the engine's error code."""

    def __init__(self, detail: str, error_code: str):
        super().__init__(
            status_code=422,
            detail=detail,
        )
        self.error_code = error_code

    @classmethod
    def from_outcome(cls, outcome: BmiOutcome) -> "BmiValidationError":
        return cls(detail=outcome.message, error_code=outcome.error.value)

    @classmethod
    def from_request_errors(cls, path: str, errors) -> "BmiValidationError":
        """
        Map a rejected request body to an engine error. A bad height field
        wins over a bad weight field; a body that is not an object at all
        counts as missing input.
        """
        fields = [
            err["loc"][1]
            for err in errors
            if len(err.get("loc", ())) >= 2 and isinstance(err["loc"][1], str)
        ]
        if any(f in HEIGHT_FIELDS for f in fields):
            kind = ErrorKind.INVALID_HEIGHT
        elif any(f in WEIGHT_FIELDS for f in fields):
            kind = ErrorKind.INVALID_WEIGHT
        else:
            message = MISSING_BOTH_MESSAGE if path.endswith("/metric") else MISSING_ALL_MESSAGE
            return cls(detail=message, error_code=ErrorKind.MISSING_INPUT.value)
        return cls(detail=ERROR_MESSAGES[kind], error_code=kind.value)


async def bmi_validation_error_handler(request: Request, exc: BmiValidationError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "error_code": exc.error_code},
    )


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Give the BMI endpoints the same error shape for unparseable bodies."""
    if not request.url.path.startswith(API_PREFIX):
        return await request_validation_exception_handler(request, exc)
    error = BmiValidationError.from_request_errors(request.url.path, exc.errors())
    return await bmi_validation_error_handler(request, error)
