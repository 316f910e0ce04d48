from intelliforms.exceptions import IntelliFormsError


class GenerationError(IntelliFormsError):
    """Raised when form generation fails.

    Messages are written for end users and may be shown in production.
    """

    expose = True


class InvalidApiKey(GenerationError):
    """Raised when the AI provider rejects the configured key."""


class QuotaExceeded(GenerationError):
    """Raised when the AI provider quota or rate limit is exhausted."""


class ContentBlocked(GenerationError):
    """Raised when the AI provider blocks the content on safety grounds."""


class InvalidModelOutput(GenerationError):
    """Raised when the model response is not a usable form object."""


class InvalidFieldSpec(InvalidModelOutput):
    """Raised when a field lacks id/label/type or has an unknown type."""

    def __init__(self, message: str, field_ref: str) -> None:
        super().__init__(message)
        self.field_ref = field_ref


class InvalidFieldOptions(InvalidModelOutput):
    """Raised when a choice field has missing or malformed options."""

    def __init__(self, message: str, field_ref: str) -> None:
        super().__init__(message)
        self.field_ref = field_ref
