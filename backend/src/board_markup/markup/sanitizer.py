"""Allow-list sanitization of rendered post markup using bleach.

The policy admits exactly the tags and attribute values the renderer emits.
Run on correct renderer output it changes nothing; when it does change
something, the renderer has a bug and a warning is logged.
"""

from __future__ import annotations

import logging
import re
from types import MappingProxyType
from typing import Mapping

import bleach

logger = logging.getLogger(__name__)

ALLOWED_TAGS = frozenset(
    {
        "h3",
        "p",
        "blockquote",
        "pre",
        "code",
        "strong",
        "em",
        "span",
        "a",
    }
)

ALLOWED_PROTOCOLS = frozenset({"http", "https"})

_CODE_CLASS = re.compile(r"language-[A-Za-z0-9_+#.-]{1,32}")

# (tag, attribute) pairs that may only carry one exact value.
_FIXED_ATTRIBUTE_VALUES: Mapping[tuple[str, str], str] = MappingProxyType(
    {
        ("pre", "class"): "blockcode",
        ("span", "class"): "spoiler",
        ("a", "class"): "post-ref",
        ("a", "rel"): "nofollow noopener",
        ("a", "target"): "_blank",
    }
)


def allow_attribute(tag: str, name: str, value: str) -> bool:
    """bleach attribute filter: the exact attribute set the renderer produces."""
    fixed = _FIXED_ATTRIBUTE_VALUES.get((tag, name))
    if fixed is not None:
        return value == fixed
    if tag == "code" and name == "class":
        return _CODE_CLASS.fullmatch(value) is not None
    if tag == "a" and name == "href":
        # Scheme checks are left to bleach's protocol allow-list.
        return True
    return False


def sanitize_html(html: str) -> str:
    """Strip any tag or attribute outside the post markup allow-list."""
    cleaned = bleach.clean(
        html,
        tags=ALLOWED_TAGS,
        attributes=allow_attribute,
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
        strip_comments=True,
    )
    if cleaned != html:
        logger.warning(
            "Sanitizer altered rendered post markup (%d -> %d chars); renderer output is outside the allow-list",
            len(html),
            len(cleaned),
        )
    return cleaned
