# blogapi/errors.py
"""
Errores de la API.

Las vistas lanzan estas excepciones y ``register_error_handlers`` las
convierte en respuestas JSON ``{"error": mensaje}`` con su código HTTP.
"""
from flask import jsonify
from werkzeug.exceptions import HTTPException


class ApiError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    def to_response(self):
        return jsonify({"error": self.message}), self.status_code


class ValidationError(ApiError):
    status_code = 400
    default_message = "Invalid input"


class Unauthenticated(ApiError):
    status_code = 401
    default_message = "Authentication required"


class Forbidden(ApiError):
    status_code = 403
    default_message = "Not authorized"


class NotFound(ApiError):
    status_code = 404
    default_message = "Not found"


class Conflict(ApiError):
    status_code = 409
    default_message = "Already exists"


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(error):
        return error.to_response()

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return jsonify({"error": error.description}), error.code
