from google.api_core import exceptions as gcloud_exceptions
from google.cloud import pubsub_v1

from intelliforms.exceptions import ConfigurationError
from intelliforms.messaging.base import BaseMessagePublisher
from intelliforms.messaging.exceptions import PublishError


class PubSubPublisher(BaseMessagePublisher):
    """Publishes messages to Google Cloud Pub/Sub.

    ``topic`` may be a bare topic name (resolved against the configured
    project) or a full ``projects/<p>/topics/<t>`` path.
    """

    def __init__(self, project_id: str = "") -> None:
        self._client = pubsub_v1.PublisherClient()
        self._project_id = project_id

    def publish(self, topic: str, data: bytes) -> str:
        topic_path = self._topic_path(topic)
        try:
            future = self._client.publish(topic_path, data)
            return str(future.result())
        except gcloud_exceptions.GoogleAPIError as exc:
            raise PublishError(f"Failed to publish to {topic_path}: {exc}") from exc

    def _topic_path(self, topic: str) -> str:
        if topic.startswith("projects/"):
            return topic
        if not self._project_id:
            raise ConfigurationError(
                "GCP_PROJECT_ID is required when PUBSUB_TOPIC is not a full path"
            )
        return self._client.topic_path(self._project_id, topic)
