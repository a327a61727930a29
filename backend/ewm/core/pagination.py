"""Pagination — converts `from`/`size` query pairs to LIMIT/OFFSET.

Invariants:
    - page = from // size; offset is always a whole number of pages
    - size > 0 and from >= 0 (enforced at the API boundary)
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Page:
    """LIMIT/OFFSET pair for a single page of results."""
    offset: int
    limit: int


def make_page(from_: int, size: int) -> Page:
    """Build a page; a `from` inside a page is rounded down to its start."""
    page = from_ // size
    return Page(offset=page * size, limit=size)
