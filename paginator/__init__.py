"""Skip/take pagination with total counts."""

from paginator.core.exceptions import InvalidArgumentError
from paginator.models import PageRequest, PageResult
from paginator.paginator import (
    MAX_SKIP,
    get_page,
    get_page_for_request,
    get_paginated_list,
    get_paginated_result,
    get_paginated_result_async,
    page_bounds,
    paginate,
)
from paginator.query import PageableQuery, count_all, fetch_all

__all__ = [
    "MAX_SKIP",
    "InvalidArgumentError",
    "PageRequest",
    "PageResult",
    "PageableQuery",
    "count_all",
    "fetch_all",
    "get_page",
    "get_page_for_request",
    "get_paginated_list",
    "get_paginated_result",
    "get_paginated_result_async",
    "page_bounds",
    "paginate",
]
