from werkzeug.exceptions import BadRequest, NotFound, InternalServerError


# Exceptions raised by the build store. They inherit from Werkzeug's HTTP exceptions
# so the Api error handlers translate them directly into JSON responses.
class ValidationError(BadRequest):
    description = "The supplied build data is invalid."


class InvalidIdentifierError(BadRequest):
    description = "The build identifier is malformed."


class NotFoundError(NotFound):
    description = "Build not found"


class StorageError(InternalServerError):
    description = "The build storage backend failed."
