"""Skip/take pagination over lazy queries and in-memory sequences.

Pages are 1-based. A page size of 0 disables pagination: the whole source is
returned and the page number is not checked.
"""

from typing import Any, Callable, Iterable, TypeVar

from paginator.core.exceptions import InvalidArgumentError
from paginator.core.logging import get_logger
from paginator.models import PageRequest, PageResult
from paginator.query import Counter, Materializer, PageableQuery, count_all, fetch_all

T = TypeVar("T")
U = TypeVar("U")

# Largest skip a database accepts (signed 64-bit).
MAX_SKIP = 2**63 - 1

log = get_logger(__name__)


def _identity(item: T) -> T:
    return item


def page_bounds(page_size: int, page: int) -> tuple[int, int] | None:
    """Return (skip, take) for the page, or None when pagination is disabled."""
    if page_size < 0:
        log.warning("paginate_rejected", reason="negative_page_size", page=page, page_size=page_size)
        raise InvalidArgumentError(
            "Cannot paginate with negative page size",
            details={"page_size": page_size},
        )
    if page_size == 0:
        return None
    if page < 1:
        log.warning("paginate_rejected", reason="page_below_one", page=page, page_size=page_size)
        raise InvalidArgumentError(
            "Cannot get a page below 1",
            details={"page": page},
        )
    skip = (page - 1) * page_size
    if skip > MAX_SKIP:
        log.warning("paginate_rejected", reason="offset_overflow", page=page, page_size=page_size)
        raise InvalidArgumentError(
            "Page offset out of range",
            details={"page": page, "page_size": page_size},
        )
    return skip, page_size


def _slice(query: Any, bounds: tuple[int, int] | None) -> Any:
    if bounds is None:
        return query
    skip, take = bounds
    return query.skip(skip).limit(take)


def paginate(query: PageableQuery, page_size: int, page: int) -> Any:
    """Narrow a lazy query to one page without evaluating it."""
    return _slice(query, page_bounds(page_size, page))


async def get_paginated_result_async(
    query: PageableQuery,
    page_size: int,
    page: int,
    mapper: Callable[[Any], U],
    counter: Counter | None = None,
    materializer: Materializer | None = None,
) -> PageResult[U]:
    """Count the whole query, fetch one page of it and map every row.

    `counter` defaults to ``query.count()`` and `materializer` to ``query.to_list()``.
    Failures raised by either callback or by `mapper` propagate unchanged.
    """
    counter = counter or count_all
    materializer = materializer or fetch_all

    bounds = page_bounds(page_size, page)
    # Count before slicing: query builders may narrow in place.
    total = await counter(query)
    rows = await materializer(_slice(query, bounds))

    items = [mapper(row) for row in rows]
    log.debug("paginated", page=page, page_size=page_size, total_count=total, returned=len(items))
    return PageResult[Any](items=items, page=page, page_size=page_size, total_count=total)


async def get_paginated_result(
    query: PageableQuery,
    request: PageRequest | None,
    mapper: Callable[[Any], U],
    counter: Counter | None = None,
    materializer: Materializer | None = None,
) -> PageResult[U]:
    """Same as `get_paginated_result_async`, reading page and size from `request`."""
    if request is None:
        raise InvalidArgumentError("Cannot paginate without pagination")
    return await get_paginated_result_async(
        query, request.page_size, request.page, mapper, counter, materializer
    )


async def get_page(
    query: PageableQuery,
    page_size: int,
    page: int,
    counter: Counter | None = None,
    materializer: Materializer | None = None,
) -> PageResult:
    return await get_paginated_result_async(query, page_size, page, _identity, counter, materializer)


async def get_page_for_request(
    query: PageableQuery,
    request: PageRequest | None,
    counter: Counter | None = None,
    materializer: Materializer | None = None,
) -> PageResult:
    return await get_paginated_result(query, request, _identity, counter, materializer)


def get_paginated_list(items: Iterable[T], request: PageRequest) -> PageResult[T]:
    """Paginate data already loaded in memory.

    The iterable is consumed once; `total_count` is its full length.
    """
    if request is None:
        raise InvalidArgumentError("Cannot paginate without pagination")
    bounds = page_bounds(request.page_size, request.page)
    data = list(items)
    if bounds is None:
        page_items = data
    else:
        skip, take = bounds
        page_items = data[skip:skip + take]
    log.debug(
        "paginated",
        page=request.page,
        page_size=request.page_size,
        total_count=len(data),
        returned=len(page_items),
    )
    return PageResult[Any](
        items=page_items,
        page=request.page,
        page_size=request.page_size,
        total_count=len(data),
    )
