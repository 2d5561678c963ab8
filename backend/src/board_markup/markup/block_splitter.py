"""Block splitting: partition a post body into headers, quotes, code blocks and paragraphs.

Line based, single forward pass. Each physical line yields at most one block;
fenced code is the only construct spanning several lines. Inline markup is
left untouched here and parsed afterwards by `inline_parser`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .scanner import FENCE, is_blank, normalize_newlines


class BlockKind(str, Enum):
    HEADER = "header"
    QUOTE = "quote"
    CODE = "code"
    PARAGRAPH = "paragraph"


@dataclass(frozen=True)
class SplitBlock:
    """A block before inline parsing. `text` is raw line content (or code)."""

    kind: BlockKind
    text: str
    language: str | None = None


def split(text: str) -> list[SplitBlock]:
    """Split a post body into blocks in input order. Blank lines yield nothing."""
    lines = normalize_newlines(text).split("\n")
    out: list[SplitBlock] = []
    i = 0
    while i < len(lines):
        line = lines[i]
        if is_blank(line):
            i += 1
            continue
        # Code fence
        if line.startswith(FENCE):
            lang = line[len(FENCE) :].strip() or None
            code_lines = []
            i += 1
            while i < len(lines) and not _is_closing_fence(lines[i]):
                code_lines.append(lines[i])
                i += 1
            # Unclosed fences run to the end of the body.
            if i < len(lines):
                i += 1
            out.append(SplitBlock(BlockKind.CODE, "\n".join(code_lines), lang))
            continue
        out.append(_split_line(line))
        i += 1
    return out


def _is_closing_fence(line: str) -> bool:
    return line.rstrip() == FENCE


def _split_line(line: str) -> SplitBlock:
    # Header
    if line.startswith("#"):
        content = _after_header_marker(line)
        if not is_blank(content):
            return SplitBlock(BlockKind.HEADER, content)
    # Quote; ">>" is a post reference, not a quote.
    elif line.startswith(">") and not line.startswith(">>"):
        content = line[1:].lstrip()
        if not is_blank(content):
            return SplitBlock(BlockKind.QUOTE, content)
    # Everything else, including "\#", "\>" and "\```" lines. The backslash is
    # kept; the inline scanner turns it into the literal marker.
    return SplitBlock(BlockKind.PARAGRAPH, line)


def _after_header_marker(line: str) -> str:
    """Rest of the line after `#` and at most one space."""
    rest = line[1:]
    if rest.startswith(" "):
        rest = rest[1:]
    return rest
