import base64
import json

import pytest

from intelliforms.messaging.exceptions import InvalidQueueMessage
from intelliforms.messaging.models import QueueMessage, decode_event_data


def _payload(**overrides: object) -> bytes:
    data: dict[str, object] = {"fileName": "a.txt", "template": "moderna", "bucket": "b"}
    data.update(overrides)
    return json.dumps(data).encode("utf-8")


class TestQueueMessageEncode:
    def test_uses_wire_keys(self) -> None:
        message = QueueMessage(file_name="a.txt", template_id="moderna", bucket_name="b")
        assert json.loads(message.encode()) == {
            "fileName": "a.txt",
            "template": "moderna",
            "bucket": "b",
        }


class TestQueueMessageDecode:
    def test_decodes_valid_payload(self) -> None:
        message = QueueMessage.decode(_payload())
        assert message == QueueMessage(file_name="a.txt", template_id="moderna", bucket_name="b")

    def test_rejects_invalid_json(self) -> None:
        with pytest.raises(InvalidQueueMessage, match="not valid JSON"):
            QueueMessage.decode(b"{not json")

    def test_rejects_non_object(self) -> None:
        with pytest.raises(InvalidQueueMessage, match="JSON object"):
            QueueMessage.decode(b'["a.txt"]')

    @pytest.mark.parametrize("missing", ["fileName", "template", "bucket"])
    def test_rejects_missing_field(self, missing: str) -> None:
        data = json.loads(_payload())
        del data[missing]
        with pytest.raises(InvalidQueueMessage, match=missing):
            QueueMessage.decode(json.dumps(data).encode())

    def test_rejects_blank_field(self) -> None:
        with pytest.raises(InvalidQueueMessage, match="template"):
            QueueMessage.decode(_payload(template="  "))


class TestDecodeEventData:
    def test_background_event_envelope(self) -> None:
        event = {"data": base64.b64encode(_payload()).decode()}
        assert decode_event_data(event) == _payload()

    def test_push_envelope(self) -> None:
        event = {"message": {"data": base64.b64encode(_payload()).decode()}}
        assert decode_event_data(event) == _payload()

    def test_rejects_missing_data(self) -> None:
        with pytest.raises(InvalidQueueMessage, match="no message data"):
            decode_event_data({"message": {}})

    def test_rejects_invalid_base64(self) -> None:
        with pytest.raises(InvalidQueueMessage, match="base64"):
            decode_event_data({"data": "%%%not-base64%%%"})

    @pytest.mark.parametrize("event", [["data"], "data", None])
    def test_rejects_non_object_event(self, event: object) -> None:
        with pytest.raises(InvalidQueueMessage, match="JSON object"):
            decode_event_data(event)  # type: ignore[arg-type]
