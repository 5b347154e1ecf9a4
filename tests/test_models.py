import pytest
from pydantic import ValidationError

from paginator import PageRequest, PageResult


def test_page_request_defaults():
    req = PageRequest()
    assert req.page == 1
    assert req.page_size == 0


def test_page_request_is_frozen():
    req = PageRequest(page=2, page_size=10)
    with pytest.raises(ValidationError):
        req.page = 3


def test_page_result_serializes():
    result = PageResult[int](items=[1, 2], page=1, page_size=2, total_count=9)
    assert result.model_dump() == {"items": [1, 2], "page": 1, "page_size": 2, "total_count": 9}
