import uuid
from collections.abc import Callable

from intelliforms.logging.logger import Log
from intelliforms.messaging.base import BaseMessagePublisher


class InlinePublisher(BaseMessagePublisher):
    """Hands each message straight to an in-process handler.

    Stands in for a real queue during local development: the publish call
    returns only after the handler has run.
    """

    def __init__(self, handler: Callable[[bytes], object]) -> None:
        self._handler = handler

    def publish(self, topic: str, data: bytes) -> str:
        message_id = uuid.uuid4().hex
        Log.debug(f"Inline delivery of message {message_id} on topic {topic}")
        self._handler(data)
        return message_id
