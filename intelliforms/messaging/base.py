from abc import ABC, abstractmethod


class BaseMessagePublisher(ABC):
    """Contract for all queue publishing adapters."""

    @abstractmethod
    def publish(self, topic: str, data: bytes) -> str:
        """Publish ``data`` to ``topic`` and return the transport message id.

        Raises:
            PublishError: if the transport rejects the message.
        """
