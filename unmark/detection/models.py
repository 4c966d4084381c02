from dataclasses import dataclass, field


@dataclass(frozen=True)
class DetectionEntry:
    """Occurrences of one watermark character in the scanned text."""

    character: str
    name: str
    count: int
    unicode_label: str  # e.g. "U+200B"


@dataclass(frozen=True)
class DetectionResult:
    """Output of one detector run.

    Entries follow catalogue order and only cover characters that occur at
    least once.
    """

    original_length: int
    entries: list[DetectionEntry] = field(default_factory=list)
    total_removed: int = 0

    @property
    def watermarks_detected(self) -> bool:
        return self.total_removed > 0
