"""Pytest configuration and fixtures for Vellum tests."""

from collections.abc import Iterator
from itertools import count

import pytest

from vellum import Element, configure
from vellum.settings import Settings
from vellum.utils import terminal


@pytest.fixture(autouse=True, scope="session")
def plain_terminal() -> Iterator[None]:
    """Disable ANSI styling so error messages compare as plain text."""
    previous = terminal._USE_COLORS
    terminal._USE_COLORS = False
    yield
    terminal._USE_COLORS = previous


@pytest.fixture
def sequential_ids() -> Iterator[Settings]:
    """Generated element ids use a counter: dialog-1, dialog-2, ..."""
    counter = count(1)
    with configure(id_factory=lambda: str(next(counter))) as settings:
        yield settings


@pytest.fixture
def silent_fallbacks() -> Iterator[Settings]:
    """Option fallbacks produce no diagnostics."""
    with configure(fallback_policy="ignore") as settings:
        yield settings


def assert_classes(element: Element, expected: str) -> None:
    """Assert an element's class attribute equals ``expected`` token for token.

    Args:
        element: The rendered element.
        expected: Space-separated classes, in order.
    """
    actual = element.classes.split()
    assert actual == expected.split(), (
        f"Class mismatch:\n"
        f"  Actual: {actual!r}\n"
        f"  Expected: {expected.split()!r}"
    )
