"""
Domain exceptions shared by the resource store, identity gate and intake pipeline.

Each exception carries the HTTP status the request boundary maps it to.
"""

from typing import Any, Optional


class ServiceException(Exception):
    """Base exception for service layer errors."""
    status_code = 500

    def __init__(self, message: str, detail: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail


class AuthMissingException(ServiceException):
    """Raised when the request carries no usable bearer credential."""
    status_code = 401


class AuthInvalidException(ServiceException):
    """Raised when the identity provider rejects the credential."""
    status_code = 403


class ValidationException(ServiceException):
    """Raised when input fails shape validation."""
    status_code = 400

    def __init__(self, message: str, missing_fields: Optional[list] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class ResourceNotFoundException(ServiceException):
    """Raised when an identified mutation target does not exist for the owner."""
    status_code = 404


class DocumentParseException(ServiceException):
    """Raised when an uploaded document cannot be read as a document."""
    status_code = 400


class UpstreamServiceException(ServiceException):
    """Raised when the generative service fails or returns an error."""
    status_code = 500


class ServerMisconfiguredException(ServiceException):
    """Raised when required server configuration is absent."""
    status_code = 500


class PersistenceException(ServiceException):
    """Raised when the store fails while writing."""
    status_code = 500
