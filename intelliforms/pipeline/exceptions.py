from intelliforms.exceptions import IntelliFormsError
from intelliforms.pipeline.pipeline import PipelineStage


class PipelineAborted(IntelliFormsError):
    """Raised when a pipeline run stops before completion.

    ``stage`` is the last stage reached; the failing exception is ``cause``.
    """

    def __init__(self, stage: PipelineStage, file_name: str, cause: Exception) -> None:
        super().__init__(f"Pipeline aborted after stage '{stage.value}' for {file_name}: {cause}")
        self.stage = stage
        self.file_name = file_name
        self.cause = cause
