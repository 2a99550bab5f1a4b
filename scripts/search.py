"""Search packages or unit files from the terminal through a running gateway.

Usage:
    uv run python -m scripts.search <packages|services|timers> <query> [pages]

Fetches the first page and then up to `pages - 1` more (default 1 page),
the same way the browser UI does. Gateway base URL comes from GATEWAY_URL
(default http://127.0.0.1:8000).
"""

from __future__ import annotations

import asyncio
import os
import sys

import httpx

from unitfinder.client import PackageResult, SearchController
from unitfinder.domain.enums import Collection

_DEFAULT_GATEWAY_URL = "http://127.0.0.1:8000"


def _print_result(item: object, collection: Collection, gateway_url: str) -> None:
    if isinstance(item, PackageResult):
        print(f"{item.name} {item.version}  ({item.url})")
        if item.description:
            print(f"    {item.description}")
        return
    print(f"{item.filename}  [{item.package}]")
    print(f"    {gateway_url}{item.download_path(collection)}")


async def main() -> None:
    """Run one query and print every hit loaded."""
    if len(sys.argv) < 3:
        print(
            "Usage: uv run python -m scripts.search <packages|services|timers> <query> [pages]",
            file=sys.stderr,
        )
        sys.exit(1)
    try:
        collection = Collection(sys.argv[1])
    except ValueError:
        print(f"Unknown collection: {sys.argv[1]}", file=sys.stderr)
        sys.exit(1)
    query = sys.argv[2]
    pages = int(sys.argv[3]) if len(sys.argv) > 3 else 1
    gateway_url = os.environ.get("GATEWAY_URL", _DEFAULT_GATEWAY_URL).rstrip("/")

    async with httpx.AsyncClient(base_url=gateway_url, timeout=30.0) as http:
        controller = SearchController(http, collection)
        controller.set_query(query)
        await controller.wait()
        for _ in range(pages - 1):
            if controller.load_more() is None:
                break
            await controller.wait()

    for item in controller.accumulated:
        _print_result(item, collection, gateway_url)
    shown = len(controller.accumulated)
    print(f"\n{shown} of ~{controller.estimated_total} hits", end="")
    print(" (more available)" if controller.has_more else " (no more)")


if __name__ == "__main__":
    asyncio.run(main())
