# -----------------------------------------------------------------------------
# Highlight markup
# Purpose:
#   Derive per-position role tags for a displayed string. Markup is a pure
#   function of (text, position, role) and is rebuilt for every step; styling
#   is left to the renderer.
# -----------------------------------------------------------------------------

from __future__ import annotations
from typing import Optional

from .types import CharMark, Markup, Role


def render_markup(text: str, position: Optional[int] = None, role: Role = Role.NEUTRAL) -> Markup:
    """
    Tag every character of `text` as neutral, except `position` which gets `role`.
    position=None leaves the whole string neutral.
    Raises IndexError for a position outside the string.
    """
    if position is not None and not 0 <= position < len(text):
        raise IndexError(f"position {position} out of range for string of length {len(text)}")
    return tuple(
        CharMark(c, role if i == position else Role.NEUTRAL)
        for i, c in enumerate(text)
    )


def neutral_markup(text: str) -> Markup:
    return render_markup(text)


def markup_to_text(markup: Markup, brackets: str = "[]") -> str:
    # Plain-text view: highlighted characters wrapped, e.g. "ab[c]d".
    left, right = brackets[0], brackets[-1]
    return "".join(
        m.char if m.role is Role.NEUTRAL else f"{left}{m.char}{right}"
        for m in markup
    )
