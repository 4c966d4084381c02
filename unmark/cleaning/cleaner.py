"""Watermark cleaner.

Processing flow:
1. Invisible characters are deleted (or, under the word-boundary policy, a run
   of them between two alphanumerics becomes one space).
2. Spacing characters become an ASCII space.
3. Line/paragraph separators become a newline.
4. Runs of spaces and tabs on the same line collapse to a single space.
5. Whitespace before sentence punctuation is removed; a run after it is
   reduced to one space.
6. A leading/trailing run of 2+ spaces or tabs becomes one space, and a
   leading/trailing run of 2+ newlines becomes one newline.
"""

from __future__ import annotations

import re
from typing import ClassVar

from unmark.catalogue.models import Category
from unmark.catalogue.registry import codepoints_for
from unmark.cleaning.base import BaseCleaner
from unmark.cleaning.models import BoundaryPolicy


def _build_translation_table(*, keep_invisible: bool) -> dict[int, str | None]:
    table: dict[int, str | None] = {}
    if not keep_invisible:
        table.update({ord(ch): None for ch in codepoints_for(Category.INVISIBLE)})
    table.update({ord(ch): " " for ch in codepoints_for(Category.SPACING)})
    table.update({ord(ch): "\n" for ch in codepoints_for(Category.LINE_BREAK)})
    return table


class Cleaner(BaseCleaner):
    """Deterministic cleaner driven by the character catalogue."""

    _HORIZONTAL_RUN_RE: ClassVar[re.Pattern[str]] = re.compile(r"[ \t]{2,}")
    _SPACE_BEFORE_PUNCT_RE: ClassVar[re.Pattern[str]] = re.compile(r"[ \t]+([.,!?;:])")
    _SPACES_AFTER_PUNCT_RE: ClassVar[re.Pattern[str]] = re.compile(r"([.,!?;:])[ \t]{2,}")
    _LEADING_SPACES_RE: ClassVar[re.Pattern[str]] = re.compile(r"\A[ \t]{2,}")
    _TRAILING_SPACES_RE: ClassVar[re.Pattern[str]] = re.compile(r"[ \t]{2,}\Z")
    _LEADING_NEWLINES_RE: ClassVar[re.Pattern[str]] = re.compile(r"\A\n{2,}")
    _TRAILING_NEWLINES_RE: ClassVar[re.Pattern[str]] = re.compile(r"\n{2,}\Z")

    def __init__(self, policy: BoundaryPolicy = BoundaryPolicy.ALWAYS_DELETE) -> None:
        self._policy = policy
        self._invisible = codepoints_for(Category.INVISIBLE)
        self._table = _build_translation_table(
            keep_invisible=policy is BoundaryPolicy.INSERT_SPACE_AT_WORD_BOUNDARY
        )

    @property
    def policy(self) -> BoundaryPolicy:
        return self._policy

    def clean(self, text: str) -> str:
        if not text:
            return text

        # Steps 1-3
        if self._policy is BoundaryPolicy.INSERT_SPACE_AT_WORD_BOUNDARY:
            text = self._replace_invisible_runs(text)
        text = text.translate(self._table)

        # Step 4
        text = self._HORIZONTAL_RUN_RE.sub(" ", text)

        # Step 5
        text = self._SPACE_BEFORE_PUNCT_RE.sub(r"\1", text)
        text = self._SPACES_AFTER_PUNCT_RE.sub(r"\1 ", text)

        # Step 6
        text = self._LEADING_SPACES_RE.sub(" ", text)
        text = self._TRAILING_SPACES_RE.sub(" ", text)
        text = self._LEADING_NEWLINES_RE.sub("\n", text)
        text = self._TRAILING_NEWLINES_RE.sub("\n", text)
        return text

    def _replace_invisible_runs(self, text: str) -> str:
        """Drop invisible runs, leaving a space where one separated two words."""
        parts: list[str] = []
        n = len(text)
        i = 0
        while i < n:
            if text[i] not in self._invisible:
                parts.append(text[i])
                i += 1
                continue
            end = i
            while end < n and text[end] in self._invisible:
                end += 1
            before_ok = i > 0 and text[i - 1].isalnum()
            after_ok = end < n and text[end].isalnum()
            if before_ok and after_ok:
                parts.append(" ")
            i = end
        return "".join(parts)
