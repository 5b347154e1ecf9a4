"""Lazy query shape accepted by the async paginator."""

from typing import Any, Awaitable, Callable, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class PageableQuery(Protocol[T]):
    """Ordered, lazily evaluated source, e.g. a beanie ``FindMany`` or a motor cursor wrapper.

    ``skip``/``limit`` return the narrowed query. Implementations may narrow in place
    and return ``self``.
    """

    def skip(self, n: int) -> Any: ...

    def limit(self, n: int) -> Any: ...

    async def count(self) -> int: ...

    async def to_list(self) -> list[T]: ...


Counter = Callable[[Any], Awaitable[int]]
Materializer = Callable[[Any], Awaitable[list[Any]]]


async def count_all(query: PageableQuery) -> int:
    """Count every row the query matches."""
    return await query.count()


async def fetch_all(query: PageableQuery) -> list:
    """Materialize the query into a list."""
    return await query.to_list()
