import logging
from werkzeug.exceptions import HTTPException # Base for many Flask/Werkzeug errors

from flask_restx import Api
from buildtracker import settings

log = logging.getLogger(__name__)

api = Api(version='1.0',
          title='Build Tracker API',
          description='API for recording builds and tracking their status.',
         )


def _error_body(error):
    response_data = {
        "message": error.description or error.name,
        "code": error.code
    }
    # Storage failures keep the driver exception; only expose it in debug mode
    original = getattr(error, 'original_exception', None)
    if settings.FLASK_DEBUG and original is not None:
        response_data['error'] = str(original)
    return response_data


# General error handler for werkzeug.exceptions.HTTPException, which also covers the
# build store exceptions in buildtracker.utils.errors
@api.errorhandler(HTTPException)
def handle_http_exception(error):
    """Return JSON instead of HTML for HTTP errors."""
    if error.code >= 500:
        log.error(f"HTTPException caught: {error.code} - {error.name} - {error.description}", exc_info=settings.FLASK_DEBUG)
    else:
        log.warning(f"HTTPException caught: {error.code} - {error.name} - {error.description}")
    return _error_body(error), error.code


# Default error handler for any exception not specifically caught
@api.errorhandler(Exception)
def default_error_handler(e):
    # This check prevents our generic 500 handler from overriding more specific HTTP exception responses.
    if isinstance(e, HTTPException):
        log.error(f"Unhandled HTTPException: {e.code} - {e.name} - {e.description}", exc_info=settings.FLASK_DEBUG)
        return _error_body(e), e.code

    # For non-HTTP exceptions (true unexpected errors)
    message = 'An internal server error occurred. Please try again later.'
    log.exception("Unhandled Exception caught by default_error_handler:") # Logs full stack trace

    if settings.FLASK_DEBUG: # Provide more details in debug mode
        return {'message': str(e), 'type': type(e).__name__, 'code': 500}, 500

    return {'message': message, "code": 500}, 500
