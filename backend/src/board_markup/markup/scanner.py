"""Low-level character helpers shared by the block splitter and inline scanner."""

from __future__ import annotations

import html
import re
from urllib.parse import quote

# Characters a backslash can escape, both at line start and inside a line.
ESCAPABLE = frozenset("#>\\`*~")

FENCE = "```"

LINK_SCHEMES = ("http://", "https://")

# Never part of a URL; an autolink stops before them.
_LINK_STOP = frozenset('<>"`{}|\\^')

# Left outside the link when they end the token ("see https://x.org.").
_LINK_TRAILING = frozenset(".,:;!?'*~")

# Kept as-is when building an href; everything else is percent-encoded.
_URL_SAFE = "-._~:/?#@!$&()*+,;=%"

MAX_POST_ID = 2**64 - 1

_STRAY_PERCENT = re.compile(r"%(?![0-9A-Fa-f]{2})")

# C0 controls HTML parsers drop or rewrite; shown as U+FFFD instead.
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def is_blank(line: str) -> bool:
    return not line.strip()


def is_escape_at(text: str, i: int) -> bool:
    """True if text[i] is a backslash escaping the next character."""
    return text[i] == "\\" and i + 1 < len(text) and text[i + 1] in ESCAPABLE


def find_closing(text: str, start: int, delim: str, *, skip_pairs: bool = False) -> int:
    """Index of the next unescaped `delim` at or after `start`, or -1.

    With `skip_pairs`, a doubled delimiter (``**``) is stepped over rather
    than matched, so a single ``*`` never closes on half of a bold marker.
    """
    n = len(text)
    pair = delim * 2
    i = start
    while i < n:
        if is_escape_at(text, i):
            i += 2
            continue
        if skip_pairs and text.startswith(pair, i):
            i += 2
            continue
        if text.startswith(delim, i):
            return i
        i += 1
    return -1


def unescape_code(text: str) -> str:
    """Drop the backslash from \\` and \\\\ inside a code span."""
    out: list[str] = []
    i = 0
    while i < len(text):
        if text[i] == "\\" and i + 1 < len(text) and text[i + 1] in "`\\":
            out.append(text[i + 1])
            i += 2
            continue
        out.append(text[i])
        i += 1
    return "".join(out)


def scan_digits(text: str, start: int) -> int:
    """End index of the run of ASCII digits beginning at `start`."""
    i = start
    while i < len(text) and "0" <= text[i] <= "9":
        i += 1
    return i


def scan_link(text: str, start: int) -> int:
    """End index of an autolink starting at `start`, or -1 if there is none."""
    scheme = next((s for s in LINK_SCHEMES if text.startswith(s, start)), None)
    if scheme is None:
        return -1
    body_start = start + len(scheme)
    end = body_start
    while end < len(text) and not text[end].isspace() and text[end] not in _LINK_STOP:
        end += 1
    while end > body_start:
        last = text[end - 1]
        if last in _LINK_TRAILING:
            end -= 1
        elif last == ")" and text.count("(", start, end) < text.count(")", start, end):
            end -= 1
        else:
            break
    if end == body_start:
        return -1
    return end


def escape_text(text: str) -> str:
    return html.escape(_CONTROL_CHARS.sub("\ufffd", text), quote=False)


def escape_attr(value: str) -> str:
    return html.escape(value, quote=True)


def quote_url(url: str) -> str:
    """Percent-encode a URL for use in an href attribute."""
    return quote(_STRAY_PERCENT.sub("%25", url), safe=_URL_SAFE)
