from dataclasses import dataclass, field

from unmark.detection.models import DetectionEntry


@dataclass(frozen=True)
class ProcessingStats:
    """Detection figures plus the length of the cleaned text."""

    original_length: int
    cleaned_length: int
    characters_removed: int
    watermarks_detected: bool
    detected_watermarks: list[DetectionEntry] = field(default_factory=list)


@dataclass(frozen=True)
class ProcessingResult:
    """Merged output of detection and cleaning for one input."""

    original: str
    cleaned: str
    stats: ProcessingStats
