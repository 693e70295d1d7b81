"""
License text normalization.

Responsibilities:
- collapse premature line breaks (manual wrapping at ~80 columns) into a space
- keep paragraph separators (two or more breaks) byte-for-byte
- absorb horizontal whitespace around a collapsed break
- leave breaks at the very start or end of the text alone

The scan works on maximal blank runs: stretches made only of line terminators
and horizontal whitespace that contain at least one terminator. A run is
collapsed only when it holds exactly one break and has a character to join on
both sides.
"""

from __future__ import annotations

import unicodedata
from typing import Iterable, Optional

DEFAULT_LINE_TERMINATORS = frozenset(
    {"\n", "\r", "\x0b", "\x0c", "\x85", "\u2028", "\u2029"}
)


def _default_horizontal_whitespace(ch: str) -> bool:
    return ch == "\t" or unicodedata.category(ch) == "Zs"


class LineBreakNormalizer:
    """Single-pass scanner collapsing lone line breaks into spaces."""

    def __init__(
        self,
        terminators: Iterable[str] = DEFAULT_LINE_TERMINATORS,
        horizontal_whitespace: Optional[Iterable[str]] = None,
        crlf_as_one: bool = True,
    ) -> None:
        self.terminators = frozenset(terminators)
        if not self.terminators:
            raise ValueError("at least one line terminator is required")
        for term in self.terminators:
            if len(term) != 1:
                raise ValueError(f"line terminators must be single characters, got {term!r}")

        if horizontal_whitespace is None:
            self._is_horizontal = _default_horizontal_whitespace
        else:
            allowed = frozenset(horizontal_whitespace)
            for ch in allowed:
                if len(ch) != 1:
                    raise ValueError(f"horizontal whitespace must be single characters, got {ch!r}")
            self._is_horizontal = allowed.__contains__

        clashing = sorted(t for t in self.terminators if self._is_horizontal(t))
        if clashing:
            raise ValueError(f"characters configured as both terminator and whitespace: {clashing!r}")

        self.crlf_as_one = crlf_as_one and "\r" in self.terminators and "\n" in self.terminators

    def _is_blank(self, ch: str) -> bool:
        return ch in self.terminators or self._is_horizontal(ch)

    def _break_length(self, text: str, i: int) -> int:
        """Length of the break starting at `i`, 0 when there is none."""
        if text[i] not in self.terminators:
            return 0
        if self.crlf_as_one and text.startswith("\r\n", i):
            return 2
        return 1

    def _collapse(self, text: str, start: int, end: int) -> str:
        run = text[start:end]
        breaks = 0
        first_break = -1
        first_len = 0
        i = 0
        while i < len(run):
            width = self._break_length(run, i)
            if width:
                breaks += 1
                if first_break < 0:
                    first_break, first_len = i, width
                i += width
            else:
                i += 1

        if breaks != 1:
            return run

        lead = run[:first_break]
        trail = run[first_break + first_len:]
        keep_lead = ""
        keep_trail = ""
        # at a text edge, the outermost whitespace is what the break joins to
        if start == 0:
            if not lead:
                return run
            keep_lead = lead[0]
        if end == len(text):
            if not trail:
                return run
            keep_trail = trail[-1]
        return keep_lead + " " + keep_trail

    def normalize(self, text: str) -> str:
        if not text:
            return text

        pieces: list[str] = []
        n = len(text)
        i = 0
        while i < n:
            blank = self._is_blank(text[i])
            j = i + 1
            while j < n and self._is_blank(text[j]) == blank:
                j += 1
            pieces.append(self._collapse(text, i, j) if blank else text[i:j])
            i = j
        return "".join(pieces)


_DEFAULT_NORMALIZER = LineBreakNormalizer()


def filter_out_premature_line_breaks(text: str) -> str:
    """
    Replace single line breaks with spaces, keeping multiple breaks used for formatting.

    Examples:
    - "Line one\\nLine two" -> "Line one Line two"
    - "Paragraph A\\n\\nParagraph B" -> unchanged
    """
    return _DEFAULT_NORMALIZER.normalize(text)
