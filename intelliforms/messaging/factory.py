from collections.abc import Callable

from intelliforms.config.settings import Settings
from intelliforms.messaging.base import BaseMessagePublisher
from intelliforms.messaging.inline_adapter import InlinePublisher
from intelliforms.messaging.pubsub_adapter import PubSubPublisher


class PublisherFactory:
    """Creates the queue publisher selected by settings."""

    BACKENDS = ("pubsub", "inline")

    @classmethod
    def create(
        cls,
        settings: Settings,
        inline_handler: Callable[[bytes], object] | None = None,
    ) -> BaseMessagePublisher:
        backend = settings.queue_backend.lower()
        if backend == "pubsub":
            return PubSubPublisher(project_id=settings.gcp_project_id)
        if backend == "inline":
            if inline_handler is None:
                raise ValueError("queue_backend=inline needs an in-process handler")
            return InlinePublisher(inline_handler)
        raise ValueError(
            f"Unknown queue backend '{backend}'. Choose from: {list(cls.BACKENDS)}"
        )
