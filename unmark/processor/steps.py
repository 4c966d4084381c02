from unmark.cleaning.base import BaseCleaner
from unmark.detection.base import BaseDetector
from unmark.logging.logger import Log
from unmark.processor.exceptions import InvalidInputError
from unmark.processor.pipeline import PipelineContext, PipelineStep


class ValidateInputStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        if not isinstance(context.text, str):
            raise InvalidInputError("Input must be a string")
        Log.info(f"Incoming text length: {len(context.text)}")
        return context


class DetectStep(PipelineStep):
    def __init__(self, detector: BaseDetector) -> None:
        self._detector = detector

    def run(self, context: PipelineContext) -> PipelineContext:
        if not isinstance(context.text, str):
            raise ValueError("PipelineContext.text must be validated before detection")
        context.detection = self._detector.detect(context.text)
        return context


class CleanStep(PipelineStep):
    def __init__(self, cleaner: BaseCleaner) -> None:
        self._cleaner = cleaner

    def run(self, context: PipelineContext) -> PipelineContext:
        if not isinstance(context.text, str):
            raise ValueError("PipelineContext.text must be validated before cleaning")
        context.cleaned = self._cleaner.clean(context.text)
        return context
