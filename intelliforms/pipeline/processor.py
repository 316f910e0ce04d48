from intelliforms.config.settings import Settings
from intelliforms.extraction.extractor import TextExtractor
from intelliforms.generation.base import BaseFormGenerator
from intelliforms.pipeline.exceptions import PipelineAborted
from intelliforms.pipeline.pipeline import PipelineContext, PipelineStep
from intelliforms.pipeline.steps import (
    DecodeMessageStep,
    ExtractTextStep,
    GenerateFormStep,
    LogResultStep,
)


class Processor:
    """Runs the queued-file pipeline.

    Pipeline: decode -> extract -> generate -> log.
    The run is terminal on the first failure; nothing is retried or persisted.
    """

    def __init__(self, steps: list[PipelineStep]) -> None:
        self._steps = steps

    def process(self, raw_message: bytes) -> PipelineContext:
        """Run every step in order.

        Raises:
            PipelineAborted: wrapping the first step failure.
        """
        context = PipelineContext(raw_message=raw_message)
        for step in self._steps:
            try:
                context = step.run(context)
            except Exception as exc:
                raise PipelineAborted(context.stage, context.file_name, exc) from exc
        return context


def build_processor(
    settings: Settings,
    extractor: TextExtractor,
    generator: BaseFormGenerator,
) -> Processor:
    """Build a Processor with the standard steps."""
    return Processor(
        steps=[
            DecodeMessageStep(),
            ExtractTextStep(extractor),
            GenerateFormStep(generator, settings.max_text_chars),
            LogResultStep(),
        ]
    )
