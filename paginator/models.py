"""Pagination request and result envelopes."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class PageRequest(BaseModel):
    """1-based page number and page size; page_size 0 disables pagination."""

    model_config = ConfigDict(frozen=True)

    page: int = 1
    page_size: int = 0


class PageResult(BaseModel, Generic[T]):
    items: list[T]
    page: int
    page_size: int
    total_count: int
