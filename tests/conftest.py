from typing import Iterator

import pytest

from relbump.cli import remove_handlers


@pytest.fixture(autouse=True)
def _detach_cli_logging() -> Iterator[None]:
    """Drop handlers main() bound to a test's captured streams."""
    yield
    remove_handlers()
