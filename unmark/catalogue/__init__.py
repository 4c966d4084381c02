from unmark.catalogue.models import Category, WatermarkCharacter
from unmark.catalogue.registry import (
    WATERMARK_CHARACTERS,
    all_watermark_codepoints,
    codepoints_for,
    display_name,
    is_watermark,
    lookup,
)

__all__ = [
    "WATERMARK_CHARACTERS",
    "Category",
    "WatermarkCharacter",
    "all_watermark_codepoints",
    "codepoints_for",
    "display_name",
    "is_watermark",
    "lookup",
]
