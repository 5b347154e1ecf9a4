"""FastAPI dependencies."""

from fastapi import Query

from paginator.core.config import get_settings
from paginator.models import PageRequest


def get_page_request(
    page: int = Query(1, ge=1, description="1-based page number"),
    page_size: int | None = Query(None, ge=0, description="Items per page; 0 returns everything"),
) -> PageRequest:
    """Dependency: build a PageRequest from query parameters."""
    if page_size is None:
        page_size = get_settings().default_page_size
    return PageRequest(page=page, page_size=page_size)
