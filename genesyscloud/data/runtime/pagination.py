"""Pagination engine.

Two strategies turn a page fetch function into a lazy async sequence of record
batches:

- PageNumberPaginator: page-number/page-count listings (users, groups, queues)
- CursorPaginator: opaque continuation (job results, audit results, queue members)

Each call to ``pages`` starts a fresh, finite sequence. Nothing is fetched
before the consumer asks for the first batch.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from ..core.validation import validate_page_size
from ..models.responses import EntityListingResponse, ResponseModel
from .validator import validate_response

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageRequest:
    """Parameters of a single page fetch.

    Attributes:
        page_number: One-based page number
        page_size: Requested page size
        cursor: Continuation token from the previous page (None on the first page)
    """

    page_number: int
    page_size: int
    cursor: str | None = None


PageFetcher = Callable[[PageRequest], Awaitable[Any]]


class PageNumberPaginator:
    """Pages through ``{entities, pageCount}`` listings.

    Page 1 is always fetched; iteration stops once the page number reaches the
    reported ``pageCount`` (a count of 0 or 1 yields a single batch).
    """

    def __init__(
        self,
        schema: type[ResponseModel] = EntityListingResponse,
        *,
        resource: str = "unknown",
    ) -> None:
        self._schema = schema
        self._resource = resource

    async def pages(self, fetch: PageFetcher, page_size: int) -> AsyncIterator[list[Any]]:
        """Yield the ``entities`` batch of each page.

        Args:
            fetch: Async function fetching one page
            page_size: Requested page size

        Raises:
            PageSizeTypeInvalidError: If page_size is not an integer
            PageSizeOutOfBoundsError: If page_size is lower than 1
            IncompleteResponseError: If a page does not match the schema
        """
        validate_page_size(page_size)

        current_page = 0
        page_count = 0
        while True:
            current_page += 1
            response = await fetch(PageRequest(page_number=current_page, page_size=page_size))
            page = validate_response(response, self._schema)

            page_count = page.body.page_count
            logger.debug(
                "page_fetched",
                extra={
                    "resource": self._resource,
                    "page_number": current_page,
                    "page_count": page_count,
                    "records": len(page.body.entities),
                },
            )
            yield page.body.entities

            if current_page >= page_count:
                break


class CursorPaginator:
    """Pages through listings that signal continuation with an optional field.

    The sequence continues while the continuation field is present, even when
    its value is an empty string. The page number advances as well, for
    resources that page by number but signal the end with the field.
    """

    def __init__(
        self,
        schema: type[ResponseModel],
        *,
        items_field: str,
        continuation_field: str = "cursor",
        resource: str = "unknown",
    ) -> None:
        """Initialize cursor paginator.

        Args:
            schema: Response schema declaring the items and continuation fields
            items_field: Body attribute holding the records
            continuation_field: Body attribute holding the continuation token
            resource: Resource name used in log records
        """
        self._schema = schema
        self._items_field = items_field
        self._continuation_field = continuation_field
        self._resource = resource

    async def pages(self, fetch: PageFetcher, page_size: int) -> AsyncIterator[list[Any]]:
        """Yield the records batch of each page.

        Args:
            fetch: Async function fetching one page
            page_size: Requested page size

        Raises:
            PageSizeTypeInvalidError: If page_size is not an integer
            PageSizeOutOfBoundsError: If page_size is lower than 1
            IncompleteResponseError: If a page does not match the schema
        """
        validate_page_size(page_size)

        page_number = 0
        cursor: str | None = None
        while True:
            page_number += 1
            response = await fetch(
                PageRequest(page_number=page_number, page_size=page_size, cursor=cursor)
            )
            page = validate_response(response, self._schema)

            records = getattr(page.body, self._items_field)
            cursor = getattr(page.body, self._continuation_field)
            logger.debug(
                "page_fetched",
                extra={
                    "resource": self._resource,
                    "page_number": page_number,
                    "has_more": cursor is not None,
                    "records": len(records),
                },
            )
            yield records

            if cursor is None:
                break
