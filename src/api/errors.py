"""Maps scraper errors to HTTP responses."""

from litestar import Request, Response
from litestar.exceptions import ValidationException
from litestar.status_codes import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR
from loguru import logger

from api.schemas.problem import DocumentErrorResponse, ErrorResponse
from domain.exceptions import (
    InvalidURLError,
    LanguageUnavailableError,
    MissingInputError,
    ProblemScraperError,
)

# Errors whose message tells the caller how to fix the request.
CLIENT_ERRORS = (MissingInputError, InvalidURLError, LanguageUnavailableError)

DEFAULT_FAILURE_MESSAGE = "Request failed"
INVALID_BODY_MESSAGE = "Invalid request body"


def error_response(request: Request, message: str, status_code: int) -> Response:
    """
    Build the error body for a failed request.

    Route handlers set ``opt["success_flag"]`` to include ``success: false``
    in the body.
    """
    if request.route_handler.opt.get("success_flag"):
        body = DocumentErrorResponse(error=message).model_dump()
    else:
        body = ErrorResponse(error=message).model_dump()
    return Response(content=body, status_code=status_code)


def scraper_exception_handler(request: Request, exc: ProblemScraperError) -> Response:
    """
    Client errors keep their message; anything else gets the generic
    ``opt["failure_message"]`` of the route handler.
    """
    if isinstance(exc, CLIENT_ERRORS):
        logger.info(f"Rejected {request.url.path}: {exc}")
        return error_response(request, str(exc), HTTP_400_BAD_REQUEST)

    logger.error(f"Scraping error on {request.url.path}: {exc}")
    message = request.route_handler.opt.get("failure_message", DEFAULT_FAILURE_MESSAGE)
    return error_response(request, message, HTTP_500_INTERNAL_SERVER_ERROR)


def validation_exception_handler(request: Request, exc: ValidationException) -> Response:
    logger.info(f"Rejected {request.url.path}: {exc.detail} {exc.extra}")
    return error_response(request, INVALID_BODY_MESSAGE, HTTP_400_BAD_REQUEST)
