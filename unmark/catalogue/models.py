from dataclasses import dataclass
from enum import Enum


class Category(str, Enum):
    """How a watermark character is treated when the text is cleaned."""

    INVISIBLE = "invisible"  # deleted
    SPACING = "spacing"  # replaced with an ASCII space
    LINE_BREAK = "line-break"  # replaced with a newline


def format_unicode_label(char: str) -> str:
    """Format a single character as ``U+XXXX`` (uppercase, at least 4 digits)."""
    return f"U+{ord(char):04X}"


@dataclass(frozen=True)
class WatermarkCharacter:
    """A catalogued code point suspected of being used as a watermark."""

    codepoint: str
    name: str
    category: Category

    def __post_init__(self) -> None:
        if len(self.codepoint) != 1:
            raise ValueError(
                f"codepoint must be a single character, got {self.codepoint!r}"
            )

    @property
    def unicode_label(self) -> str:
        return format_unicode_label(self.codepoint)
