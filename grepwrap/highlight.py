from __future__ import annotations

from typing import Pattern

from .types import Span


def split_highlights(contents: str, pattern: Pattern[str] | None) -> list[Span]:
    """Cut 'contents' into plain and matched spans, in order.

    Every non-overlapping match of 'pattern' becomes a matched span and the
    text between matches is kept as plain spans, so joining the span texts
    gives back 'contents'. Empty matches carry no text and are skipped.
    """
    if pattern is None:
        return [Span(contents)] if contents else []

    spans: list[Span] = []
    offset = 0
    for m in pattern.finditer(contents):
        start, end = m.span()
        if start == end:
            continue
        if start > offset:
            spans.append(Span(contents[offset:start]))
        spans.append(Span(contents[start:end], matched=True))
        offset = end
    if offset < len(contents):
        spans.append(Span(contents[offset:]))
    return spans
