"""Document tree for a parsed post body: blocks, inline spans and the document."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Union


@dataclass(frozen=True)
class Text:
    """Literal text, escaped at render time."""

    value: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": "text", "value": self.value}


@dataclass(frozen=True)
class Bold:
    children: tuple[Inline, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {"type": "bold", "children": [c.to_dict() for c in self.children]}


@dataclass(frozen=True)
class Italic:
    children: tuple[Inline, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {"type": "italic", "children": [c.to_dict() for c in self.children]}


@dataclass(frozen=True)
class Spoiler:
    children: tuple[Inline, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {"type": "spoiler", "children": [c.to_dict() for c in self.children]}


@dataclass(frozen=True)
class CodeSpan:
    """Inline code; never parsed for further markup."""

    value: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": "code_span", "value": self.value}


@dataclass(frozen=True)
class PostRef:
    """A `>>123` citation. `uri` stays None unless refs were resolved."""

    id: int
    uri: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"type": "post_ref", "id": self.id, "uri": self.uri}


@dataclass(frozen=True)
class Link:
    url: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": "link", "url": self.url}


Inline = Union[Text, Bold, Italic, Spoiler, CodeSpan, PostRef, Link]

# Spans whose children are themselves parsed markup.
CONTAINER_SPANS = (Bold, Italic, Spoiler)


@dataclass(frozen=True)
class Header:
    content: tuple[Inline, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {"type": "header", "content": [c.to_dict() for c in self.content]}


@dataclass(frozen=True)
class Quote:
    content: tuple[Inline, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {"type": "quote", "content": [c.to_dict() for c in self.content]}


@dataclass(frozen=True)
class CodeBlock:
    """Fenced code. `raw_text` is kept verbatim; `language` is the untrusted fence hint."""

    raw_text: str
    language: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"type": "code_block", "language": self.language, "raw_text": self.raw_text}


@dataclass(frozen=True)
class Paragraph:
    content: tuple[Inline, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {"type": "paragraph", "content": [c.to_dict() for c in self.content]}


Block = Union[Header, Quote, CodeBlock, Paragraph]

# Blocks whose content is a tuple of inline spans.
TEXT_BLOCKS = (Header, Quote, Paragraph)


@dataclass(frozen=True)
class Document:
    """Ordered blocks of one post body."""

    blocks: tuple[Block, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[Block]:
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)

    def to_dict(self) -> dict[str, Any]:
        return {"blocks": [b.to_dict() for b in self.blocks]}
