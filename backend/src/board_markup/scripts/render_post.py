"""Render a post body to HTML from the command line.

Usage:
  python -m board_markup.scripts.render_post [PATH] [--no-sanitize]

Reads PATH (or stdin when omitted) and prints the rendered HTML.

Env:
  BOARD_MARKUP_FILTER_RULES_FILE (optional)
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .. import config
from ..services.post_body import load_filter_rules, render_post_body


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Render a post body to HTML.")
    parser.add_argument("path", nargs="?", help="file to render (default: stdin)")
    parser.add_argument("--no-sanitize", action="store_true", help="skip the allow-list sanitizer pass")
    args = parser.parse_args(argv)

    if args.path:
        path = Path(args.path)
        if not path.exists():
            raise SystemExit(f"File not found: {path}")
        content = path.read_text(encoding="utf-8")
    else:
        content = sys.stdin.read()

    rules = load_filter_rules(config.FILTER_RULES_FILE) if config.FILTER_RULES_FILE else []
    print(render_post_body(content, rules, sanitize=not args.no_sanitize))


if __name__ == "__main__":
    main()
