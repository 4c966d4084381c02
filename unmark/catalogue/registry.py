"""Static registry of the watermark characters recognised by unmark.

The table is built once at import time and never mutated. Its order is the
order in which detection results are reported: invisible marks first, then
spacing characters, then line separators.
"""

from types import MappingProxyType
from typing import Mapping

from unmark.catalogue.models import Category, WatermarkCharacter, format_unicode_label

WATERMARK_CHARACTERS: tuple[WatermarkCharacter, ...] = (
    # Invisible: no rendered width, deleted outright
    WatermarkCharacter("\u200b", "Zero-Width Space", Category.INVISIBLE),
    WatermarkCharacter("\u200c", "Zero-Width Non-Joiner", Category.INVISIBLE),
    WatermarkCharacter("\u200d", "Zero-Width Joiner", Category.INVISIBLE),
    WatermarkCharacter("\ufeff", "Zero-Width No-Break Space", Category.INVISIBLE),
    WatermarkCharacter("\u2060", "Word Joiner", Category.INVISIBLE),
    WatermarkCharacter("\u061c", "Arabic Letter Mark", Category.INVISIBLE),
    WatermarkCharacter("\u180e", "Mongolian Vowel Separator", Category.INVISIBLE),
    WatermarkCharacter("\u034f", "Combining Grapheme Joiner", Category.INVISIBLE),
    # Spacing: look like ordinary whitespace, normalized to U+0020
    WatermarkCharacter("\u202f", "Narrow No-Break Space", Category.SPACING),
    WatermarkCharacter("\u2003", "Em Space", Category.SPACING),
    WatermarkCharacter("\u00a0", "Non-Breaking Space", Category.SPACING),
    WatermarkCharacter("\u2011", "Non-Breaking Hyphen", Category.SPACING),
    WatermarkCharacter("\u200a", "Hair Space", Category.SPACING),
    WatermarkCharacter("\u2008", "Punctuation Space", Category.SPACING),
    # Line-break: paragraph/line separators, normalized to "\n"
    WatermarkCharacter("\u2028", "Line Separator", Category.LINE_BREAK),
    WatermarkCharacter("\u2029", "Paragraph Separator", Category.LINE_BREAK),
)


def _index(entries: tuple[WatermarkCharacter, ...]) -> Mapping[str, WatermarkCharacter]:
    by_char: dict[str, WatermarkCharacter] = {}
    for entry in entries:
        if entry.codepoint in by_char:
            raise ValueError(
                f"Duplicate catalogue entry for {entry.unicode_label} "
                f"({by_char[entry.codepoint].name!r} and {entry.name!r})"
            )
        by_char[entry.codepoint] = entry
    return MappingProxyType(by_char)


_BY_CHAR = _index(WATERMARK_CHARACTERS)

_BY_CATEGORY: Mapping[Category, frozenset[str]] = MappingProxyType(
    {
        category: frozenset(
            e.codepoint for e in WATERMARK_CHARACTERS if e.category is category
        )
        for category in Category
    }
)


def lookup(char: str) -> WatermarkCharacter | None:
    """Return the catalogue entry for *char*, or None if it is not a watermark."""
    return _BY_CHAR.get(char)


def is_watermark(char: str) -> bool:
    return char in _BY_CHAR


def display_name(char: str) -> str:
    """Human-readable name for *char*.

    Characters outside the catalogue get ``Unknown Character (U+XXXX)``.
    """
    entry = _BY_CHAR.get(char)
    if entry is None:
        return f"Unknown Character ({format_unicode_label(char)})"
    return entry.name


def all_watermark_codepoints() -> tuple[str, ...]:
    """Every registered code point, in catalogue order."""
    return tuple(_BY_CHAR)


def codepoints_for(category: Category) -> frozenset[str]:
    return _BY_CATEGORY[category]
