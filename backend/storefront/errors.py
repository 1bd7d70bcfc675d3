from __future__ import annotations

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException


class AppError(Exception):
    """Operational error that maps straight onto an HTTP response."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = int(status_code)
        self.status = "fail" if 400 <= self.status_code < 500 else "error"
        self.is_operational = True

    def to_dict(self) -> dict:
        return {
            "ok": False,
            "success": False,
            "status": self.status,
            "message": self.message,
        }


class ValidationError(AppError):
    def __init__(self, message: str, errors: list[dict] | None = None):
        super().__init__(message, 400)
        self.errors = list(errors or [])

    def to_dict(self) -> dict:
        body = super().to_dict()
        body["errors"] = [
            {"field": e.get("field") or "unknown", "message": e.get("message"), "value": e.get("value")}
            for e in self.errors
        ]
        return body


class BadRequestError(AppError):
    def __init__(self, message: str = "Bad request"):
        super().__init__(message, 400)


class UnauthorizedError(AppError):
    def __init__(self, message: str = "Unauthorized access"):
        super().__init__(message, 401)


class ForbiddenError(AppError):
    def __init__(self, message: str = "Forbidden access"):
        super().__init__(message, 403)


class NotFoundError(AppError):
    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, 404)


class ConflictError(AppError):
    def __init__(self, message: str = "Resource conflict"):
        super().__init__(message, 409)


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(AppError)
    def _app_error(e: AppError):
        if e.status_code >= 500:
            app.logger.error("AppError %s: %s", e.status_code, e.message)
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(404)
    def _not_found(e):
        return _app_error(NotFoundError(f"Route {request.path} not found"))

    @app.errorhandler(HTTPException)
    def _http_error(e: HTTPException):
        return _app_error(AppError(e.description or e.name, e.code or 500))

    @app.errorhandler(Exception)
    def _unhandled(e: Exception):
        app.logger.exception("Unhandled error on %s %s", request.method, request.path)
        body = AppError("Internal server error", 500).to_dict()
        if app.debug:
            body["error"] = type(e).__name__
        return jsonify(body), 500
