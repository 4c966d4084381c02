"""Single-pass watermark detector."""

from collections import Counter

from unmark.catalogue.registry import WATERMARK_CHARACTERS, is_watermark
from unmark.detection.base import BaseDetector
from unmark.detection.models import DetectionEntry, DetectionResult
from unmark.logging.logger import Log
from unmark.processor.exceptions import InvalidInputError


class Detector(BaseDetector):
    """Tallies catalogue characters in one scan over the input's code points."""

    def detect(self, text: str) -> DetectionResult:
        if not isinstance(text, str):
            raise InvalidInputError("Input must be a string")

        counts = Counter(ch for ch in text if is_watermark(ch))

        entries = [
            DetectionEntry(
                character=wc.codepoint,
                name=wc.name,
                count=counts[wc.codepoint],
                unicode_label=wc.unicode_label,
            )
            for wc in WATERMARK_CHARACTERS
            if counts[wc.codepoint] > 0
        ]
        result = DetectionResult(
            original_length=len(text),
            entries=entries,
            total_removed=sum(e.count for e in entries),
        )

        if Log.is_debug():
            Log.debug(
                "Input text analysis",
                length=result.original_length,
                detected={e.unicode_label: e.count for e in entries},
                total_to_remove=result.total_removed,
            )
        return result
