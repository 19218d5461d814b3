"""Bounded page-number pagination with client-side filtering.

Every list helper in this package binds its endpoint and fixed query parameters
into a `fetch_page(page, per_page)` callable and hands it to `collect`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

# GitHub rejects per_page values above 100.
MAX_PAGE_SIZE = 100

FetchPage = Callable[[int, int], Sequence[T]]
Predicate = Callable[[T], bool]


def collect(
    fetch_page: FetchPage[T],
    *,
    limit: int,
    predicate: Predicate[T] | None = None,
    page_size: int | None = None,
    max_rounds: int | None = None,
) -> list[T]:
    """Gather up to `limit` items from a paged listing.

    Pages are requested sequentially starting at page 1, always with the same
    page size. Collection stops on an empty page, on a page shorter than the
    requested size, once `limit` matches are held, or after `max_rounds`
    requests. The short-page check uses the unfiltered page length, so a full
    page that filters down to nothing still advances to the next page.

    Args:
        fetch_page: Callable returning the items of `(page, per_page)`.
        limit: Maximum number of items returned.
        predicate: Optional filter applied to each item before it is kept.
        page_size: Page size to request. Defaults to `min(limit, MAX_PAGE_SIZE)`
            and is never larger than `MAX_PAGE_SIZE`.
        max_rounds: Optional cap on the number of page requests. `1` gives a
            single-page listing.

    Returns:
        Matching items in retrieval order, truncated to `limit`.

    Raises:
        ValueError: If `limit` is negative or `page_size`/`max_rounds` is not positive.
    """

    if limit < 0:
        raise ValueError("limit must be a non-negative integer")
    if max_rounds is not None and max_rounds <= 0:
        raise ValueError("max_rounds must be a positive integer")
    if limit == 0:
        return []

    per_page = min(page_size if page_size is not None else limit, MAX_PAGE_SIZE)
    if per_page <= 0:
        raise ValueError("page_size must be a positive integer")

    items: list[T] = []
    page = 1
    while True:
        logger.debug("Fetching page", extra={"page": page, "per_page": per_page})
        page_items = fetch_page(page, per_page)
        if not page_items:
            break

        if predicate is None:
            items.extend(page_items)
        else:
            items.extend(item for item in page_items if predicate(item))

        if len(page_items) < per_page or len(items) >= limit:
            break
        if max_rounds is not None and page >= max_rounds:
            break
        page += 1

    return items[:limit]


def has_all_labels(label_names: Sequence[str], required: Sequence[str]) -> bool:
    """Return True when every label in `required` is present in `label_names`."""

    return all(name in label_names for name in required)
