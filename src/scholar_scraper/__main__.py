"""Dev CLI for scholar-scraper. Usage: python -m scholar_scraper <query>"""

from __future__ import annotations

import asyncio
import sys


def main() -> None:
    if len(sys.argv) < 2:
        print("Usage: python -m scholar_scraper <query>", file=sys.stderr)
        sys.exit(1)

    query = " ".join(sys.argv[1:])
    try:
        results = asyncio.run(_run(query))
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    from scholar_scraper import export_markdown

    print(export_markdown(results))


async def _run(query: str):
    from scholar_scraper import search
    from scholar_scraper.config import load_config

    config = load_config()
    return await search(query, config=config)


if __name__ == "__main__":
    main()
