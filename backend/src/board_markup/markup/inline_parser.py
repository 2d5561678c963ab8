"""Inline span parsing for header, quote and paragraph text.

`parse_inline` is total: unmatched or empty delimiters fall back to literal
text and scanning continues at the next character, so every string parses.
"""

from __future__ import annotations

from typing import Callable

from .nodes import Bold, CodeSpan, Inline, Italic, Link, PostRef, Spoiler, Text
from .scanner import (
    MAX_POST_ID,
    find_closing,
    is_escape_at,
    scan_digits,
    scan_link,
    unescape_code,
)

# Bold/italic/spoiler deeper than this are left as literal text.
MAX_INLINE_DEPTH = 16

_Match = tuple[Inline, int] | None

# delimiter -> earliest start offset known to have no closer after it
_Misses = dict[str, int]


def parse_inline(text: str, depth: int = 0) -> tuple[Inline, ...]:
    """Parse one block's text into a tuple of spans, left to right."""
    spans: list[Inline] = []
    buf: list[str] = []
    misses: _Misses = {}
    i = 0
    n = len(text)
    while i < n:
        if is_escape_at(text, i):
            buf.append(text[i + 1])
            i += 2
            continue
        match = _match_span(text, i, depth, misses)
        if match is None:
            buf.append(text[i])
            i += 1
            continue
        span, i = match
        if buf:
            spans.append(Text("".join(buf)))
            buf = []
        spans.append(span)
    if buf:
        spans.append(Text("".join(buf)))
    return tuple(spans)


def _match_span(text: str, i: int, depth: int, misses: _Misses) -> _Match:
    for matcher in _MATCHERS:
        match = matcher(text, i, depth, misses)
        if match is not None:
            return match
    return None


def _match_post_ref(text: str, i: int, depth: int, misses: _Misses) -> _Match:
    if not text.startswith(">>", i):
        return None
    end = scan_digits(text, i + 2)
    if end == i + 2:
        return None
    post_id = int(text[i + 2 : end])
    if post_id > MAX_POST_ID:
        return None
    return PostRef(post_id), end


def _match_link(text: str, i: int, depth: int, misses: _Misses) -> _Match:
    end = scan_link(text, i)
    if end == -1:
        return None
    return Link(text[i:end]), end


def _find_closer(text: str, start: int, delim: str, misses: _Misses) -> int:
    # Once a search fails, no closer exists further right either; remembering
    # that keeps long runs of unmatched openers linear.
    if start >= misses.get(delim, len(text) + 1):
        return -1
    close = find_closing(text, start, delim)
    if close == -1:
        misses[delim] = min(start, misses.get(delim, start))
    return close


def _match_code_span(text: str, i: int, depth: int, misses: _Misses) -> _Match:
    if text[i] != "`":
        return None
    close = _find_closer(text, i + 1, "`", misses)
    if close <= i + 1:
        return None
    return CodeSpan(unescape_code(text[i + 1 : close])), close + 1


def _delimited(
    delim: str, wrap: Callable[[tuple[Inline, ...]], Inline], *, skip_pairs: bool = False
) -> Callable[[str, int, int, _Misses], _Match]:
    """Matcher for `delim`content`delim` whose content is parsed recursively."""
    size = len(delim)

    def match(text: str, i: int, depth: int, misses: _Misses) -> _Match:
        if depth >= MAX_INLINE_DEPTH or not text.startswith(delim, i):
            return None
        start = i + size
        if skip_pairs:
            # A single delimiter never opens on half of a doubled one.
            if text.startswith(delim, start):
                return None
            # Pair skipping depends on where the scan starts, so no caching.
            close = find_closing(text, start, delim, skip_pairs=True)
        else:
            close = _find_closer(text, start, delim, misses)
        if close <= start:
            return None
        return wrap(parse_inline(text[start:close], depth + 1)), close + size

    return match


_MATCHERS: tuple[Callable[[str, int, int, _Misses], _Match], ...] = (
    _match_post_ref,
    _match_link,
    _match_code_span,
    _delimited("**", Bold),
    _delimited("*", Italic, skip_pairs=True),
    _delimited("~", Spoiler),
)
