"""
Application error types and their HTTP rendering.

The data-access layer raises these instead of HTTPException so it stays
usable outside a request; the handler registered in main.py turns them
into JSON responses.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


class AppError(Exception):
    """Base error carrying an HTTP status code."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(AppError):
    """Raised when input cannot be applied (empty update, bad reference, duplicate)."""
    status_code = 400


class UnauthorizedError(AppError):
    """Raised when credentials are missing, invalid, or lack the required role."""
    status_code = 401


class NotFoundError(AppError):
    """Raised when the requested record does not exist."""
    status_code = 404


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
        headers=headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
