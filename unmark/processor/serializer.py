from typing import Any

from unmark.detection.models import DetectionEntry
from unmark.processor.models import ProcessingResult


class ResultSerializer:
    """Converts a ProcessingResult to the JSON-serializable response shape."""

    def serialize(self, result: ProcessingResult) -> dict[str, Any]:
        """Return the camelCase dict exposed to callers.

        Returns:
            Dict with 'original', 'cleaned' and 'stats' keys.
        """
        stats = result.stats
        return {
            "original": result.original,
            "cleaned": result.cleaned,
            "stats": {
                "originalLength": stats.original_length,
                "cleanedLength": stats.cleaned_length,
                "charactersRemoved": stats.characters_removed,
                "watermarksDetected": stats.watermarks_detected,
                "detectedWatermarks": [
                    self._entry_to_dict(e) for e in stats.detected_watermarks
                ],
            },
        }

    def _entry_to_dict(self, entry: DetectionEntry) -> dict[str, Any]:
        return {
            "character": entry.character,
            "name": entry.name,
            "count": entry.count,
            "unicode": entry.unicode_label,
        }
