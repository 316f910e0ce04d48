import json

from intelliforms.extraction.exceptions import EmptyDocumentError
from intelliforms.extraction.extractor import TextExtractor
from intelliforms.generation.base import BaseFormGenerator
from intelliforms.logging.logger import Log
from intelliforms.messaging.models import QueueMessage
from intelliforms.pipeline.pipeline import PipelineContext, PipelineStage, PipelineStep


class DecodeMessageStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.message = QueueMessage.decode(context.raw_message)
        context.stage = PipelineStage.DECODED
        Log.info(
            "Processing started",
            file_name=context.message.file_name,
            template=context.message.template_id,
        )
        return context


class ExtractTextStep(PipelineStep):
    def __init__(self, extractor: TextExtractor) -> None:
        self._extractor = extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.message is None:
            raise ValueError("PipelineContext.message must be set before extraction")
        text = self._extractor.extract(
            context.message.bucket_name, context.message.file_name
        )
        if not text.strip():
            raise EmptyDocumentError(f"No text extracted from {context.message.file_name}")
        context.extracted_text = text
        context.stage = PipelineStage.EXTRACTED
        return context


class GenerateFormStep(PipelineStep):
    def __init__(self, generator: BaseFormGenerator, max_text_chars: int) -> None:
        self._generator = generator
        self._max_text_chars = max_text_chars

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.message is None:
            raise ValueError("PipelineContext.message must be set before generation")
        text = context.extracted_text[: self._max_text_chars]
        Log.info(
            f"Generating form from {len(text)} chars "
            f"(extracted {len(context.extracted_text)})",
            file_name=context.message.file_name,
        )
        context.form = self._generator.generate(text, context.message.template_id)
        context.stage = PipelineStage.GENERATED
        return context


class LogResultStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        if context.form is None:
            raise ValueError("PipelineContext.form must be set before logging the result")
        # Results are not persisted; the log line is the only record.
        Log.info(
            f"Form generated for {context.file_name}:\n"
            f"{json.dumps(context.form.to_dict(), indent=2, ensure_ascii=False)}"
        )
        context.stage = PipelineStage.COMPLETED
        return context
