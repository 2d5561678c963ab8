"""Post body service: word filters, parsing, post-ref resolution and safe HTML.

The markup engine itself (`board_markup.markup`) is pure and knows nothing
about configuration or storage. This module wires it to filter rules from the
board configuration and to a caller-supplied post lookup.
"""

from __future__ import annotations

import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Callable, Optional, Sequence

from pydantic import TypeAdapter

from ..markup import (
    Document,
    Inline,
    PostRef,
    render,
    render_html,
    sanitize_html,
)
from ..markup.nodes import CONTAINER_SPANS, TEXT_BLOCKS
from ..models import FilterRule

logger = logging.getLogger(__name__)

# post id -> URI of that post, or None when it does not exist
PostLookup = Callable[[int], Optional[str]]

_rules_adapter = TypeAdapter(list[FilterRule])


def load_filter_rules(path: str | Path) -> list[FilterRule]:
    """Load filter rules from a JSON file.

    Raises ValueError for a missing or malformed file and
    pydantic.ValidationError for rules with an invalid pattern.
    """
    path = Path(path)
    if not path.exists():
        raise ValueError(f"Filter rules file not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Filter rules file {path} is not valid JSON: {e}") from e
    rules = _rules_adapter.validate_python(data)
    logger.info("Loaded %d filter rules from %s", len(rules), path)
    return rules


def apply_filter_rules(content: str, rules: Sequence[FilterRule]) -> str:
    """Apply each rule in order, every match replaced."""
    for rule in rules:
        content = rule.pattern.sub(rule.replace_with, content)
    return content


def parse_post_body(content: str, rules: Sequence[FilterRule] = ()) -> Document:
    """Filter and parse a post body into a Document."""
    return render(apply_filter_rules(content, rules))


def resolve_post_refs(doc: Document, lookup: PostLookup) -> Document:
    """Return a copy of `doc` with every PostRef's uri set from `lookup`.

    Runs after parsing, never during it; `lookup` returning None leaves the
    reference unresolved.
    """
    blocks = []
    for block in doc:
        if isinstance(block, TEXT_BLOCKS):
            block = replace(block, content=_resolve_spans(block.content, lookup))
        blocks.append(block)
    return Document(tuple(blocks))


def _resolve_spans(spans: tuple[Inline, ...], lookup: PostLookup) -> tuple[Inline, ...]:
    out: list[Inline] = []
    for span in spans:
        if isinstance(span, PostRef):
            span = replace(span, uri=lookup(span.id))
        elif isinstance(span, CONTAINER_SPANS):
            span = replace(span, children=_resolve_spans(span.children, lookup))
        out.append(span)
    return tuple(out)


def render_post_body(
    content: str,
    rules: Sequence[FilterRule] = (),
    lookup: PostLookup | None = None,
    *,
    sanitize: bool = True,
) -> str:
    """Filter, parse, optionally resolve refs, render and sanitize a post body."""
    doc = parse_post_body(content, rules)
    if lookup is not None:
        doc = resolve_post_refs(doc, lookup)
    html = render_html(doc)
    logger.debug("Rendered post body: %d chars -> %d blocks", len(content), len(doc))
    if not sanitize:
        return html
    return sanitize_html(html)
