#!/usr/bin/env python3
"""
Bake chart exports that are missing or older than their chart config.

Usage:
    python bake_charts.py URL [URL ...]         # Re-render stale charts
    python bake_charts.py URL ... --silent      # Don't echo renderer output
    python bake_charts.py --indexable           # Print public chart listing as JSON
"""

import json
import sys

from app.container import container
from app.errors import RenderError
from settings.logging import setup_logging

logger = setup_logging(level="INFO", to_file=True)


def print_indexable() -> None:
    """Dump published charts with their public tags."""
    charts = container.grapher.get_indexable_charts()
    print(json.dumps([c.to_dict() for c in charts], indent=2))


def main():
    args = sys.argv[1:]

    if "--help" in args or "-h" in args:
        print(__doc__)
        return

    container.init()

    if "--indexable" in args:
        print_indexable()
        return

    silent = "--silent" in args
    urls = [a for a in args if not a.startswith("--")]
    if not urls:
        print(__doc__)
        sys.exit(1)

    try:
        baked = container.chart_baker.bake_grapher_urls(urls, silent=silent)
    except RenderError as e:
        logger.error("{}", e.message)
        sys.exit(1)

    logger.info("Done: {} baked, {} up to date or skipped", len(baked), len(urls) - len(baked))


if __name__ == "__main__":
    main()
