from unmark.detection.base import BaseDetector
from unmark.detection.detector import Detector
from unmark.detection.models import DetectionEntry, DetectionResult

__all__ = ["BaseDetector", "DetectionEntry", "DetectionResult", "Detector"]
