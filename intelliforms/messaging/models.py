import base64
import binascii
import json
from dataclasses import dataclass
from typing import Any

from intelliforms.messaging.exceptions import InvalidQueueMessage


@dataclass(frozen=True)
class QueueMessage:
    """Work item published by the notifier and consumed by the pipeline.

    Wire form is a JSON object ``{"fileName", "template", "bucket"}``.
    """

    file_name: str
    template_id: str
    bucket_name: str

    def to_dict(self) -> dict[str, str]:
        return {
            "fileName": self.file_name,
            "template": self.template_id,
            "bucket": self.bucket_name,
        }

    def encode(self) -> bytes:
        return json.dumps(self.to_dict()).encode("utf-8")

    @classmethod
    def decode(cls, data: bytes) -> "QueueMessage":
        """Parse a raw JSON payload.

        Raises:
            InvalidQueueMessage: if the payload is not a JSON object or a
                field is missing or blank.
        """
        try:
            payload = json.loads(data.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise InvalidQueueMessage(f"Queue payload is not valid JSON: {exc}") from exc
        if not isinstance(payload, dict):
            raise InvalidQueueMessage("Queue payload must be a JSON object")

        missing = [
            key
            for key in ("fileName", "template", "bucket")
            if not isinstance(payload.get(key), str) or not payload[key].strip()
        ]
        if missing:
            raise InvalidQueueMessage(
                f"Queue payload is missing fields: {', '.join(missing)}"
            )
        return cls(
            file_name=payload["fileName"],
            template_id=payload["template"],
            bucket_name=payload["bucket"],
        )


def decode_event_data(event: dict[str, Any]) -> bytes:
    """Extract the raw payload from a Pub/Sub push or background-event envelope.

    Accepts ``{"data": "<base64>"}`` and ``{"message": {"data": "<base64>"}}``.

    Raises:
        InvalidQueueMessage: if no data is present or it is not base64.
    """
    if not isinstance(event, dict):
        raise InvalidQueueMessage("Event must be a JSON object")
    message = event.get("message", event)
    data = message.get("data") if isinstance(message, dict) else None
    if not data:
        raise InvalidQueueMessage("Event carries no message data")
    try:
        return base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidQueueMessage(f"Event data is not valid base64: {exc}") from exc
