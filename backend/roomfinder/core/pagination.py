"""Pagination: page window resolution and RFC 5988 Link header construction.

Invariants:
    - Pages are zero-based; size is clamped to [1, max_size]
    - No page window is produced when neither page nor size was requested
    - Link always carries `last` and `first`; `next`/`prev` only when they exist
"""

import math

from roomfinder.core.domain_types import PageRequest


def resolve_page_request(
    page: int | None, size: int | None, default_size: int, max_size: int,
) -> PageRequest | None:
    """Build a PageRequest from optional query values. Pure."""
    if page is None and size is None:
        return None
    size = default_size if size is None else size
    return PageRequest(page=max(page or 0, 0), size=min(max(size, 1), max_size))


def total_pages(total: int, size: int) -> int:
    return math.ceil(total / size) if size else 0


def build_link_header(base_url: str, page: PageRequest, total: int) -> str:
    """Build the Link header value for a page of `total` items."""
    pages = total_pages(total, page.size)
    links = []
    if page.page + 1 < pages:
        links.append(_link(base_url, page.page + 1, page.size, "next"))
    if page.page > 0:
        links.append(_link(base_url, page.page - 1, page.size, "prev"))
    last_page = pages - 1 if pages > 0 else 0
    links.append(_link(base_url, last_page, page.size, "last"))
    links.append(_link(base_url, 0, page.size, "first"))
    return ",".join(links)


def _link(base_url: str, page: int, size: int, rel: str) -> str:
    return f'<{base_url}?page={page}&size={size}>; rel="{rel}"'
