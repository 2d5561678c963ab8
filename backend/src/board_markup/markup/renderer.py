"""Document -> HTML using a fixed tag vocabulary.

Output only ever uses h3, p, blockquote, pre, code, strong, em, span and a,
with the attributes the sanitizer policy admits. Every piece of user text is
escaped here; the sanitizer pass is a backstop, not the primary defence.
"""

from __future__ import annotations

import re

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
from .scanner import escape_attr, escape_text, quote_url

# Fence languages allowed into class="language-..."; anything else is dropped
# and the highlighter falls back to auto-detection.
LANGUAGE_TOKEN = re.compile(r"[A-Za-z0-9_+#.-]{1,32}")

LINK_REL = "nofollow noopener"
LINK_TARGET = "_blank"


def render_html(doc: Document) -> str:
    return "".join(_render_block(block) for block in doc)


def language_class(language: str | None) -> str | None:
    """`language-<token>` for a safe fence language, else None."""
    if language and LANGUAGE_TOKEN.fullmatch(language):
        return f"language-{language}"
    return None


def _render_block(block: Block) -> str:
    if isinstance(block, Header):
        return f"<h3>{_render_spans(block.content)}</h3>"
    if isinstance(block, Quote):
        return f"<blockquote><p>{_render_spans(block.content)}</p></blockquote>"
    if isinstance(block, CodeBlock):
        css = language_class(block.language)
        code = escape_text(block.raw_text)
        if css is None:
            return f'<pre class="blockcode"><code>{code}</code></pre>'
        return f'<pre class="blockcode"><code class="{escape_attr(css)}">{code}</code></pre>'
    if isinstance(block, Paragraph):
        return f"<p>{_render_spans(block.content)}</p>"
    raise TypeError(f"unknown block: {block!r}")


def _render_spans(spans: tuple[Inline, ...]) -> str:
    return "".join(_render_span(span) for span in spans)


def _render_span(span: Inline) -> str:
    if isinstance(span, Text):
        return escape_text(span.value)
    if isinstance(span, Bold):
        return f"<strong>{_render_spans(span.children)}</strong>"
    if isinstance(span, Italic):
        return f"<em>{_render_spans(span.children)}</em>"
    if isinstance(span, Spoiler):
        return f'<span class="spoiler">{_render_spans(span.children)}</span>'
    if isinstance(span, CodeSpan):
        return f"<code>{escape_text(span.value)}</code>"
    if isinstance(span, PostRef):
        if span.uri:
            return f'<a class="post-ref" href="{escape_attr(quote_url(span.uri))}">{span.id}</a>'
        return f'<a class="post-ref">{span.id}</a>'
    if isinstance(span, Link):
        href = escape_attr(quote_url(span.url))
        return (
            f'<a href="{href}" rel="{LINK_REL}" target="{LINK_TARGET}">'
            f"{escape_text(span.url)}</a>"
        )
    raise TypeError(f"unknown span: {span!r}")
