from abc import ABC, abstractmethod
from dataclasses import dataclass

from unmark.detection.models import DetectionResult


@dataclass(slots=True)
class PipelineContext:
    text: object
    detection: DetectionResult | None = None
    cleaned: str | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
