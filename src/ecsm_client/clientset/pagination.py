"""Exhaustive pagination over single-page listings.

Every paginated resource exposes a ``list`` operation returning one
:class:`~.base.Page`. :func:`list_all` drives that operation from page 1
until the result set is exhausted and returns every item in order.

Two stop rules exist because the ECSM endpoints disagree on what they
report: most return an authoritative ``total`` (:attr:`TerminationPolicy.COUNT`),
while the config listing returns a bare array and can only signal its end
with a short page (:attr:`TerminationPolicy.SHORT_PAGE`). An empty page
always ends the traversal, whatever the policy.
"""

import enum
from collections.abc import Callable, Iterator
from typing import TypeVar

import structlog

from .base import ListOptions, Page

logger = structlog.get_logger(__name__)

T = TypeVar("T")
O = TypeVar("O", bound=ListOptions)  # noqa: E741

DEFAULT_PAGE_SIZE = 100


class TerminationPolicy(enum.Enum):
    """When a non-empty page is the last one."""

    COUNT = "count"
    SHORT_PAGE = "short_page"

    def is_last(self, page: Page, collected: int, page_size: int) -> bool:
        """Decide whether ``page`` ends the traversal.

        Args:
            page: The page just fetched (non-empty).
            collected: Items accumulated so far, including ``page``.
            page_size: Page size that was requested.
        """
        if self is TerminationPolicy.COUNT and page.total is not None:
            return collected >= page.total
        # No total to count against: only a short page can end it
        return len(page.items) < page_size


def iter_pages(
    list_page: Callable[[O], Page[T]],
    opts: O,
    policy: TerminationPolicy = TerminationPolicy.COUNT,
) -> Iterator[Page[T]]:
    """Yield every non-empty page, fetching one page at a time.

    The caller's ``page_num`` is ignored: traversal always starts at page 1.
    ``opts`` itself is never mutated.

    Args:
        list_page: Single-page listing operation.
        opts: Listing options; ``page_size`` of 0 means
            :data:`DEFAULT_PAGE_SIZE`.
        policy: Stop rule for non-empty pages.

    Yields:
        Pages in server order.

    Raises:
        Whatever ``list_page`` raises, annotated with the failing page.
    """
    opts = opts.model_copy(
        update={"page_num": 1, "page_size": opts.page_size or DEFAULT_PAGE_SIZE},
    )
    collected = 0

    while True:
        try:
            page = list_page(opts)
        except Exception as err:
            err.add_note(f"while fetching page {opts.page_num} (pageSize={opts.page_size})")
            raise

        if not page.items:
            logger.debug("Pagination exhausted", page_num=opts.page_num)
            return

        collected += len(page.items)
        logger.debug(
            "Fetched page",
            page_num=opts.page_num,
            page_items=len(page.items),
            collected=collected,
            total=page.total,
        )
        yield page

        if policy.is_last(page, collected, opts.page_size):
            return
        opts = opts.model_copy(update={"page_num": opts.page_num + 1})


def list_all(
    list_page: Callable[[O], Page[T]],
    opts: O,
    policy: TerminationPolicy = TerminationPolicy.COUNT,
) -> list[T]:
    """Fetch every page and concatenate the items.

    Either the complete result set is returned or the first error is
    raised; partial results are never returned.
    """
    items: list[T] = []
    pages = 0
    for page in iter_pages(list_page, opts, policy):
        items.extend(page.items)
        pages += 1
    logger.debug("Listed all items", item_count=len(items), page_count=pages, policy=policy.value)
    return items
