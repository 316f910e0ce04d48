from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from intelliforms.generation.models import FormSpec
from intelliforms.messaging.models import QueueMessage


class PipelineStage(str, Enum):
    RECEIVED = "received"
    DECODED = "decoded"
    EXTRACTED = "extracted"
    GENERATED = "generated"
    COMPLETED = "completed"


@dataclass(slots=True)
class PipelineContext:
    raw_message: bytes
    stage: PipelineStage = PipelineStage.RECEIVED
    message: QueueMessage | None = None
    extracted_text: str = ""
    form: FormSpec | None = None

    @property
    def file_name(self) -> str:
        return self.message.file_name if self.message is not None else "<unknown>"


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
