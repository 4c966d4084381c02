from abc import ABC, abstractmethod

from unmark.detection.models import DetectionResult


class BaseDetector(ABC):
    """Contract for all watermark detectors."""

    @abstractmethod
    def detect(self, text: str) -> DetectionResult:
        """Count the watermark characters present in *text*.

        Args:
            text: Input text; never modified.

        Returns:
            DetectionResult with one entry per watermark character found.

        Raises:
            InvalidInputError: if *text* is not a string.
        """
