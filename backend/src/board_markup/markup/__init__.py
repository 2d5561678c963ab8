"""Post body markup: split, parse, render and sanitize."""

from .block_splitter import BlockKind, SplitBlock, split
from .engine import render
from .inline_parser import MAX_INLINE_DEPTH, parse_inline
from .nodes import (
    Block,
    Bold,
    CodeBlock,
    CodeSpan,
    Document,
    Header,
    Inline,
    Italic,
    Link,
    Paragraph,
    PostRef,
    Quote,
    Spoiler,
    Text,
)
from .renderer import render_html
from .sanitizer import ALLOWED_TAGS, sanitize_html

__all__ = [
    "BlockKind",
    "SplitBlock",
    "split",
    "render",
    "parse_inline",
    "MAX_INLINE_DEPTH",
    "Block",
    "Bold",
    "CodeBlock",
    "CodeSpan",
    "Document",
    "Header",
    "Inline",
    "Italic",
    "Link",
    "Paragraph",
    "PostRef",
    "Quote",
    "Spoiler",
    "Text",
    "render_html",
    "ALLOWED_TAGS",
    "sanitize_html",
]
