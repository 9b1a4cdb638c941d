#!/usr/bin/env python3
"""
Custom exceptions and error handlers for the web application.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse

from core.scorer import ScoringValidationError

logger = logging.getLogger(__name__)


class ServiceException(Exception):
    """Base exception for service layer errors."""
    pass


class JobNotFoundException(ServiceException):
    """Raised when a job is not found."""
    pass


class ApplicationNotFoundException(ServiceException):
    """Raised when an application is not found."""
    pass


class InvalidScoreException(ServiceException):
    """Raised when a manual score is outside 0-100."""
    pass


class AuthenticationRequiredException(ServiceException):
    """Raised when the caller's identity is missing."""
    pass


class AccessDeniedException(ServiceException):
    """Raised when the caller's role does not grant the operation."""
    pass


async def service_exception_handler(
    request: Request,
    exc: ServiceException
) -> JSONResponse:
    """
    Handle service layer exceptions.

    Args:
        request: The FastAPI request.
        exc: The service exception.

    Returns:
        JSONResponse with error details.
    """
    status_code = 500
    if isinstance(exc, (JobNotFoundException, ApplicationNotFoundException)):
        status_code = 404
    elif isinstance(exc, InvalidScoreException):
        status_code = 400
    elif isinstance(exc, AuthenticationRequiredException):
        status_code = 401
    elif isinstance(exc, AccessDeniedException):
        status_code = 403

    if status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.warning(f"{exc.__class__.__name__} in {request.url.path}: {exc}")

    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": str(exc),
            "type": exc.__class__.__name__
        }
    )


async def validation_exception_handler(
    request: Request,
    exc: ScoringValidationError
) -> JSONResponse:
    """
    Handle scoring engine validation errors (records missing identity fields).
    """
    logger.error(f"Invalid record while ranking in {request.url.path}: {exc}")

    return JSONResponse(
        status_code=422,
        content={
            "success": False,
            "error": str(exc),
            "type": "ValidationError"
        }
    )


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """
    Handle FastAPI HTTP exceptions with consistent format.

    Args:
        request: The FastAPI request.
        exc: The HTTP exception.

    Returns:
        JSONResponse with error details.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": exc.detail,
            "type": "HTTPException"
        }
    )


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions.

    Args:
        request: The FastAPI request.
        exc: The exception.

    Returns:
        JSONResponse with error details.
    """
    logger.exception(f"Unexpected error in {request.url.path}")

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
            "type": "InternalError"
        }
    )
