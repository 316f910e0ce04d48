from intelliforms.exceptions import ConfigurationError, MissingParameter
from intelliforms.logging.logger import Log
from intelliforms.messaging.base import BaseMessagePublisher
from intelliforms.messaging.models import QueueMessage
from intelliforms.uploads.models import UploadNotification


class UploadNotifier:
    """Turns an "upload complete" signal into a queued work message.

    Success means the message was accepted by the transport, not that the
    pipeline has run.
    """

    def __init__(
        self,
        publisher: BaseMessagePublisher,
        *,
        topic: str,
        bucket_name: str,
    ) -> None:
        self._publisher = publisher
        self._topic = topic
        self._bucket_name = bucket_name

    def notify(self, file_name: str, template_id: str) -> str:
        """Publish a work message and return the transport message id.

        Raises:
            MissingParameter: if ``file_name`` or ``template_id`` is blank.
            ConfigurationError: if the topic or bucket is not configured.
            PublishError: if the transport rejects the message.
        """
        notification = UploadNotification(
            file_name=(file_name or "").strip(),
            template_id=(template_id or "").strip(),
        )
        if not notification.file_name:
            raise MissingParameter("Missing parameter: fileName")
        if not notification.template_id:
            raise MissingParameter("Missing parameter: template")
        self._require_configuration()

        message = QueueMessage(
            file_name=notification.file_name,
            template_id=notification.template_id,
            bucket_name=self._bucket_name,
        )
        message_id = self._publisher.publish(self._topic, message.encode())
        Log.info(
            "Upload notification queued",
            file_name=message.file_name,
            template=message.template_id,
            message_id=message_id,
        )
        return message_id

    def _require_configuration(self) -> None:
        missing = [
            name
            for name, value in (
                ("PUBSUB_TOPIC", self._topic),
                ("BUCKET_NAME", self._bucket_name),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(f"Missing configuration: {', '.join(missing)}")
