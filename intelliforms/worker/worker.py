from concurrent.futures import TimeoutError as FutureTimeoutError

from google.cloud import pubsub_v1
from google.cloud.pubsub_v1.subscriber.message import Message

from intelliforms.config.settings import Settings
from intelliforms.exceptions import ConfigurationError
from intelliforms.logging.logger import Log
from intelliforms.worker.message_handler import MessageHandler


class Worker:
    """Streaming-pull loop: receive -> handle -> ack."""

    def __init__(
        self,
        handler: MessageHandler,
        settings: Settings,
        subscriber: pubsub_v1.SubscriberClient | None = None,
    ) -> None:
        self._handler = handler
        self._settings = settings
        self._subscriber = subscriber

    def run(self, timeout: float | None = None) -> None:
        """Consume messages until interrupted.

        If ``timeout`` is set, stop after that many seconds (for testing).
        """
        subscription = self._subscription_path()
        subscriber = self._subscriber or pubsub_v1.SubscriberClient()
        future = subscriber.subscribe(subscription, callback=self._on_message)
        Log.info(f"Worker started, listening on {subscription}")
        with subscriber:
            try:
                future.result(timeout=timeout)
            except (KeyboardInterrupt, FutureTimeoutError):
                future.cancel()
                future.result()
                Log.info("Worker shutting down gracefully")

    def _on_message(self, message: Message) -> None:
        Log.debug(f"Received message {message.message_id}")
        try:
            self._handler.handle(message.data)
        finally:
            # Terminal either way: failures are logged, never redelivered.
            message.ack()

    def _subscription_path(self) -> str:
        subscription = self._settings.pubsub_subscription
        if not subscription:
            raise ConfigurationError("PUBSUB_SUBSCRIPTION is not configured")
        if subscription.startswith("projects/"):
            return subscription
        if not self._settings.gcp_project_id:
            raise ConfigurationError(
                "GCP_PROJECT_ID is required when PUBSUB_SUBSCRIPTION is not a full path"
            )
        return f"projects/{self._settings.gcp_project_id}/subscriptions/{subscription}"
