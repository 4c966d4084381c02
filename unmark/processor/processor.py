from unmark.cleaning.factory import CleanerFactory
from unmark.config.settings import Settings
from unmark.detection.detector import Detector
from unmark.logging.logger import Log
from unmark.processor.models import ProcessingResult, ProcessingStats
from unmark.processor.pipeline import PipelineContext, PipelineStep
from unmark.processor.steps import CleanStep, DetectStep, ValidateInputStep


class Processor:
    """Runs the detection and cleaning steps and merges their output.

    Pipeline: validate -> detect -> clean. Detection and cleaning read the same
    input and never see each other's output.
    """

    def __init__(self, steps: list[PipelineStep]) -> None:
        self._steps = steps

    def process(self, text: str) -> ProcessingResult:
        """Detect and clean watermark characters in *text*.

        Raises:
            InvalidInputError: if *text* is not a string.
        """
        context = PipelineContext(text=text)
        for step in self._steps:
            context = step.run(context)

        if context.detection is None or context.cleaned is None:
            raise ValueError("Pipeline must produce both a detection and a cleaned text")

        detection = context.detection
        result = ProcessingResult(
            original=text,
            cleaned=context.cleaned,
            stats=ProcessingStats(
                original_length=detection.original_length,
                cleaned_length=len(context.cleaned),
                characters_removed=detection.total_removed,
                watermarks_detected=detection.watermarks_detected,
                detected_watermarks=list(detection.entries),
            ),
        )
        Log.info(
            f"Cleaned text: removed {result.stats.characters_removed} watermark characters"
        )
        return result


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with the detector and the configured cleaner."""
    cleaner = CleanerFactory.create(settings)
    return Processor(
        steps=[
            ValidateInputStep(),
            DetectStep(detector=Detector()),
            CleanStep(cleaner=cleaner),
        ]
    )
