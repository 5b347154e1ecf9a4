import os

import pytest

os.environ.setdefault("PAGINATION_DEFAULT_PAGE_SIZE", "0")

from paginator.core.config import get_settings  # noqa: E402
from paginator.core.logging import configure_logging  # noqa: E402

_settings = get_settings()
configure_logging(debug=_settings.debug, level=_settings.log_level)


class FakeQuery:
    """In-memory stand-in for a beanie FindMany: skip/limit narrow in place."""

    def __init__(self, rows):
        self.rows = list(rows)
        self.skip_number = 0
        self.limit_number = 0
        self.calls: list[str] = []

    def skip(self, n):
        self.calls.append(f"skip:{n}")
        self.skip_number = n
        return self

    def limit(self, n):
        self.calls.append(f"limit:{n}")
        self.limit_number = n
        return self

    def _window(self):
        rows = self.rows[self.skip_number:]
        if self.limit_number:
            rows = rows[: self.limit_number]
        return rows

    async def count(self):
        self.calls.append("count")
        return len(self._window())

    async def to_list(self):
        self.calls.append("to_list")
        return self._window()


@pytest.fixture
def numbers():
    return list(range(1, 26))


@pytest.fixture
def make_query(numbers):
    return lambda: FakeQuery(numbers)


@pytest.fixture
def query(make_query):
    return make_query()
