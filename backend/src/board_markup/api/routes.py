"""API routes: render and parse previews of post bodies."""

from __future__ import annotations

import logging
from functools import lru_cache

from fastapi import APIRouter, HTTPException

from .. import config
from ..markup import render_html, sanitize_html
from ..models import FilterRule, ParseResponse, RenderRequest, RenderResponse
from ..services.post_body import load_filter_rules, parse_post_body

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["api"])


@lru_cache(maxsize=1)
def get_filter_rules() -> tuple[FilterRule, ...]:
    """Filter rules from BOARD_MARKUP_FILTER_RULES_FILE, loaded once."""
    if not config.FILTER_RULES_FILE:
        return ()
    return tuple(load_filter_rules(config.FILTER_RULES_FILE))


def _check_size(body: str) -> None:
    if len(body) > config.MAX_BODY_CHARS:
        logger.info("Rejected post body of %d chars (limit %d)", len(body), config.MAX_BODY_CHARS)
        raise HTTPException(413, f"Post body exceeds {config.MAX_BODY_CHARS} characters")


@router.post("/render", response_model=RenderResponse)
async def api_render(body: RenderRequest):
    """Render a post body to sanitized HTML."""
    _check_size(body.body)
    doc = parse_post_body(body.body, get_filter_rules())
    html = sanitize_html(render_html(doc))
    return RenderResponse(html=html, block_count=len(doc))


@router.post("/parse", response_model=ParseResponse)
async def api_parse(body: RenderRequest):
    """Parse a post body and return its document tree."""
    _check_size(body.body)
    doc = parse_post_body(body.body, get_filter_rules())
    return ParseResponse(**doc.to_dict())
