class IntelliFormsError(Exception):
    """Base exception for all application errors.

    ``status_code`` is the HTTP status the API answers with; ``expose`` tells
    the API whether the message may be shown in production.
    """

    status_code: int = 500
    expose: bool = False


class ClientInputError(IntelliFormsError):
    """Raised when a request carries invalid or incomplete input."""

    status_code = 400
    expose = True


class InvalidExtension(ClientInputError):
    """Raised when a file extension is not in the allow-set."""


class FileTooLarge(ClientInputError):
    """Raised when a declared or received file size is out of bounds."""


class MissingParameter(ClientInputError):
    """Raised when a required request parameter is absent or blank."""


class Unauthorized(IntelliFormsError):
    """Raised when the shared-secret API key is missing or wrong."""

    status_code = 401
    expose = True


class MethodNotAllowed(IntelliFormsError):
    """Raised when an endpoint is called with the wrong HTTP method."""

    status_code = 405
    expose = True


class ConfigurationError(IntelliFormsError):
    """Raised when required environment configuration is missing."""


class StoreError(IntelliFormsError):
    """Raised when the blob store rejects or fails a call."""
