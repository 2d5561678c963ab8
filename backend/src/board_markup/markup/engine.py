"""Text -> Document: block splitting followed by inline parsing of each block."""

from __future__ import annotations

from .block_splitter import BlockKind, SplitBlock, split
from .inline_parser import parse_inline
from .nodes import Block, CodeBlock, Document, Header, Paragraph, Quote


def render(text: str) -> Document:
    """Parse a raw post body into a Document. Never raises for any string."""
    return Document(tuple(_build_block(b) for b in split(text)))


def _build_block(block: SplitBlock) -> Block:
    if block.kind is BlockKind.CODE:
        return CodeBlock(raw_text=block.text, language=block.language)
    content = parse_inline(block.text)
    if block.kind is BlockKind.HEADER:
        return Header(content)
    if block.kind is BlockKind.QUOTE:
        return Quote(content)
    return Paragraph(content)
