from __future__ import annotations

from typing import Iterable, List


def odd_pages(total: int) -> List[int]:
    """1-based odd page numbers up to ``total``: 5 -> [1, 3, 5], 4 -> [1, 3]."""
    if total < 1:
        raise ValueError(f"total must be >= 1, got {total}")
    return list(range(1, total + 1, 2))


def format_page_ranges(pages: Iterable[int]) -> str:
    """Render a page list in the browser's page range syntax ("1,3,5")."""
    return ",".join(str(p) for p in pages)
