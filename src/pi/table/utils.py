"""Cell text utilities: ANSI stripping, grapheme widths, visible edges.

Rendered cells may carry SGR styling, OSC 8 hyperlinks or APC markers as
well as zero-width characters. The helpers here find what a terminal
actually shows at the start and end of a cell.
"""

from __future__ import annotations

import re
import unicodedata

import grapheme
import wcwidth as _wcwidth

# ---------------------------------------------------------------------------
# Regex patterns for ANSI / OSC / APC sequences
# ---------------------------------------------------------------------------

_STRIP_RE = re.compile(
    r"\x1b\[[0-9;]*[mGKHJ]"        # CSI
    r"|\x1b\]8;;[^\x07]*\x07"       # OSC 8
    r"|\x1b_[^\x07\x1b]*(?:\x07|\x1b\\)"  # APC
)


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from *text*."""
    return _STRIP_RE.sub("", text)


# ---------------------------------------------------------------------------
# Grapheme width
# ---------------------------------------------------------------------------

def _grapheme_width(g: str) -> int:
    """Return the terminal display width of a single grapheme cluster.

    Rules:
    1. Zero-width characters (control, combining marks, format) -> 0
    2. Emoji (VS16, ZWJ sequences, modifiers, regional indicators) -> 2
    3. Otherwise delegate to wcwidth for the first codepoint.
    """
    if not g:
        return 0

    if len(g) == 1:
        cp = ord(g)
        if cp < 0x20 or (0x7F <= cp <= 0x9F):
            # Tabs, newlines and friends still read as blank space
            return 1 if g.isspace() else 0
        return max(_wcwidth.wcwidth(g), 0)

    for ch in g:
        cp = ord(ch)
        if cp in (0xFE0F, 0x200D):  # VS16, ZWJ
            return 2
        if 0x1F3FB <= cp <= 0x1F3FF or 0x1F1E6 <= cp <= 0x1F1FF:
            return 2

    first_cp = ord(g[0])
    if first_cp >= 0x1F000 or 0x2600 <= first_cp <= 0x27BF:
        return 2

    cat = unicodedata.category(g[0])
    if cat.startswith("M") or cat == "Cf":
        return 0

    return max(_wcwidth.wcwidth(g[0]), 0)


# ---------------------------------------------------------------------------
# Visible edges
# ---------------------------------------------------------------------------

def _visible_graphemes(text: str) -> list[str]:
    return [g for g in grapheme.graphemes(strip_ansi(text)) if _grapheme_width(g) > 0]


def first_visible_grapheme(text: str) -> str | None:
    """Return the first grapheme of *text* that occupies a cell, if any."""
    graphemes = _visible_graphemes(text)
    return graphemes[0] if graphemes else None


def last_visible_grapheme(text: str) -> str | None:
    """Return the last grapheme of *text* that occupies a cell, if any."""
    graphemes = _visible_graphemes(text)
    return graphemes[-1] if graphemes else None


def is_whitespace_char(char: str | None) -> bool:
    """Return ``True`` if *char* starts with a whitespace code point."""
    return bool(char) and char[0].isspace()  # type: ignore[index]
