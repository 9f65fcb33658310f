from __future__ import annotations

from flask import Flask, g, jsonify
from werkzeug.exceptions import HTTPException


class CustomerApiError(RuntimeError):
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(CustomerApiError):
    status_code = 404


class BadRequestError(CustomerApiError):
    status_code = 400


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(CustomerApiError)
    def _customer_error(e: CustomerApiError):
        return jsonify({"error": e.message}), e.status_code

    @app.errorhandler(HTTPException)
    def _http_error(e: HTTPException):
        return jsonify({"error": e.description or e.name}), e.code

    @app.errorhandler(Exception)
    def _unhandled(e: Exception):
        app.logger.exception("Unhandled 500 (request_id=%s)", getattr(g, "request_id", None))
        return jsonify({"error": "Internal server error"}), 500
