"""Error taxonomy of the API, raised by the client from response statuses."""
from fastapi import status


class ApiError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message, field=None):
        super().__init__(message)
        self.message = message
        self.field = field


class ValidationError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST


class Unauthorized(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND


class ServerError(ApiError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def error_for_status(status_code, message, field=None):
    """Build the taxonomy exception matching an HTTP error status."""
    for error_class in (ValidationError, Unauthorized, NotFound):
        if error_class.status_code == status_code:
            return error_class(message, field)
    return ServerError(message, field)
