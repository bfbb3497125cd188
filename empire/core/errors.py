"""
Domain error taxonomy.

Services raise these; the exception handlers registered in ``create_app`` turn
them into ``{"error": message}`` responses with the status code of the class.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from tortoise.exceptions import BaseORMException

from empire.core.config import is_production

logger = logging.getLogger(__name__)


class DomainError(Exception):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Request could not be processed"

    def __init__(self, message: str = None):
        self.message = message or self.message
        super().__init__(self.message)


class ValidationError(DomainError):
    message = "Invalid input"

    def __init__(self, issue, message: str = None):
        self.issue = issue
        super().__init__(message or issue.value)


class NotFound(DomainError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class Conflict(DomainError):
    message = "Conflicting request"


class Forbidden(DomainError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Forbidden"


class InsufficientFunds(DomainError):
    message = "Insufficient balance"


class Unauthorized(DomainError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Could not validate credentials"


# Accounts

class AccountNotFound(NotFound):
    message = "User not found"


class AccountBanned(Forbidden):
    message = "Account is banned"

    def __init__(self, reason: str = None):
        super().__init__(f"Account is banned: {reason}" if reason else None)


class AlreadyActivated(Conflict):
    message = "Account is already activated"


class InsufficientBalance(InsufficientFunds):
    message = "Insufficient balance for activation"


class EmailTaken(Conflict):
    message = "User already exists"


class InvalidCredentials(DomainError):
    message = "Invalid credentials"


class InvalidToken(Unauthorized):
    pass


class AdminRequired(Forbidden):
    message = "Admin access required"


class ActivationRequired(Forbidden):
    message = "Activate your account to access this feature"


# Moderation and rewards

class AlreadyProcessed(Conflict):
    message = "Request already processed"


class DuplicateSubmission(Conflict):
    message = "Task already submitted"


class CapacityExceeded(Conflict):
    message = "No capacity left"


class ResourceInactive(Conflict):
    message = "Resource is not active"


class TaskHasSubmissions(Conflict):
    message = "Task has submissions; deactivate it instead of deleting"


def _error(status_code: int, message, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def _server_error(exc: Exception) -> JSONResponse:
    message = "Server error" if is_production() else f"Server error: {exc}"
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, message)


def register_exception_handlers(app: FastAPI):
    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, Unauthorized) else None
        return _error(exc.status_code, exc.message, headers)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return _error(exc.status_code, exc.detail, getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        if errors:
            first = errors[0]
            location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
            message = f"{location}: {first.get('msg')}" if location else first.get("msg")
        else:
            message = "Invalid request"
        return _error(status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(BaseORMException)
    async def storage_error_handler(request: Request, exc: BaseORMException):
        logger.error(f"[{request.method} {request.url.path}] Storage error: {exc}", exc_info=True)
        return _server_error(exc)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.error(f"[{request.method} {request.url.path}] Unexpected error: {exc}", exc_info=True)
        return _server_error(exc)
