from typing import Any

from intelliforms.logging.logger import Log
from intelliforms.messaging.exceptions import InvalidQueueMessage
from intelliforms.messaging.models import decode_event_data
from intelliforms.pipeline.exceptions import PipelineAborted
from intelliforms.pipeline.pipeline import PipelineContext
from intelliforms.pipeline.processor import Processor


class MessageHandler:
    """Run one queued message and log its terminal outcome.

    Failures are logged and swallowed so the transport never redelivers.
    """

    def __init__(self, processor: Processor) -> None:
        self._processor = processor

    def handle(self, data: bytes) -> PipelineContext | None:
        """Process a raw message payload. Returns the context on success."""
        try:
            context = self._processor.process(data)
        except PipelineAborted as exc:
            Log.error(
                "Pipeline aborted",
                file_name=exc.file_name,
                stage=exc.stage.value,
                cause=f"{type(exc.cause).__name__}: {exc.cause}",
            )
            return None
        Log.info("Processing completed", file_name=context.file_name)
        return context

    def handle_event(self, event: dict[str, Any]) -> PipelineContext | None:
        """Process a Pub/Sub push or background-event envelope."""
        try:
            data = decode_event_data(event)
        except InvalidQueueMessage as exc:
            Log.error("Discarding undecodable event", cause=exc)
            return None
        return self.handle(data)
