from intelliforms.exceptions import IntelliFormsError


class MessagingError(IntelliFormsError):
    """Base exception for all queue-related errors."""


class PublishError(MessagingError):
    """Raised when the transport refuses or fails a publish."""


class InvalidQueueMessage(MessagingError):
    """Raised when a queue payload cannot be decoded or lacks fields."""
