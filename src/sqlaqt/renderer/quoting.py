"""Identifier quoting."""

from __future__ import annotations

from collections.abc import Sequence

from sqlaqt.errors import StructuralError

STAR = "*"


def quote_segment(segment: str, open_quote: str, close_quote: str) -> str:
    """Wrap one identifier segment, doubling any embedded close quote."""
    if not close_quote:
        return segment
    escaped = segment.replace(close_quote, close_quote * 2)
    return f"{open_quote}{escaped}{close_quote}"


def render_identifier(
    segments: Sequence[str],
    *,
    quote: bool,
    quote_chars: tuple[str, str] = ('"', '"'),
    separator: str = ".",
) -> str:
    """Render a qualified name such as ``"schema"."table"`` or ``"me".*``.

    A trailing ``*`` is never quoted. A ``*`` anywhere else is rejected.
    """
    names = list(segments)
    if not names:
        raise StructuralError("name node requires at least one segment")
    for segment in names:
        if not isinstance(segment, str):
            raise StructuralError(f"name segment must be a string, not {segment!r}")
    if STAR in names[:-1]:
        raise StructuralError(f"'*' is only allowed as the last name segment: {names!r}")

    star = names.pop() if names[-1] == STAR else None
    if not names:
        return STAR

    open_quote, close_quote = quote_chars if quote else ("", "")
    ret = separator.join(quote_segment(n, open_quote, close_quote) for n in names)
    if star is not None:
        ret += separator + star
    return ret
