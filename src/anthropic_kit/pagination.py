# src/anthropic_kit/pagination.py

"""Cursor pagination over list endpoints.

Every list endpoint answers with ``has_more`` plus the ids of its first and
last item. The next page starts after ``last_id`` (or, when paging
backwards, before ``first_id``).

Example:
    >>> async for model in iterate_items(client.list_models, ListModelsParams()):
    ...     print(model.id)
"""

import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import TypeVar

from anthropic_kit.errors import SchemaMismatchError
from anthropic_kit.observability import names
from anthropic_kit.observability.base import MetricsHook, NoOpMetricsHook
from anthropic_kit.params import ListParams
from anthropic_kit.types.common import Page

logger = logging.getLogger(__name__)

T = TypeVar("T")
P = TypeVar("P", bound=ListParams)


async def paginate(
    fetch: Callable[[P], Awaitable[Page[T]]],
    params: P,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> AsyncIterator[Page[T]]:
    """Yield pages lazily until the API reports ``has_more=false``.

    ``params`` itself is never sent; each request gets a fresh copy, so the
    same value can start the sequence again.

    Raises:
        SchemaMismatchError: A page reports ``has_more`` without the id
            needed to request the next one.
    """
    backwards = params.before_id is not None and params.after_id is None
    request = params.next_page(after_id=params.after_id, before_id=params.before_id)
    page_number = 0

    while True:
        page = await fetch(request)
        page_number += 1
        metrics_hook.increment(names.PAGES_FETCHED_TOTAL)
        metrics_hook.record_gauge(names.PAGE_ITEMS, len(page.data))
        logger.debug(
            "Fetched page %d: items=%d, has_more=%s",
            page_number,
            len(page.data),
            page.has_more,
        )
        yield page

        if not page.has_more:
            return

        if backwards:
            if page.first_id is None:
                raise SchemaMismatchError(
                    "Page reports has_more but carries no first_id", field="first_id"
                )
            request = params.next_page(before_id=page.first_id)
        else:
            if page.last_id is None:
                raise SchemaMismatchError(
                    "Page reports has_more but carries no last_id", field="last_id"
                )
            request = params.next_page(after_id=page.last_id)


async def iterate_items(
    fetch: Callable[[P], Awaitable[Page[T]]],
    params: P,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> AsyncIterator[T]:
    """Flatten ``paginate`` into the items of every page, in order."""
    async for page in paginate(fetch, params, metrics_hook):
        for item in page.data:
            yield item
