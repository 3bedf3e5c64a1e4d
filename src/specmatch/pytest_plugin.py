"""pytest plugin for specmatch.

Auto-discovered by pytest via the pytest11 entry point declared in
pyproject.toml. A failed expectation fails the test with the matcher's
ko_message; a skipped one (or_skip()) marks the test as skipped.
"""

from __future__ import annotations

from typing import Any

import pytest

from specmatch._expectation import ExampleSkipped, must_satisfy, raise_for_outcome


@pytest.fixture(scope="session")
def must() -> Any:
    """Fixture that returns a callable expectation asserter.

    The fixture is session-scoped because the returned callable is stateless.

    Usage in tests::

        def test_ages(must):
            must({"alice": 31}, have_key("alice"))
            must({"alice": 31}, have.the.value(31), description="the ages")

    Returns:
        A callable ``_must(value, matcher, *, description=None) -> None``
        that raises ``ExpectationFailure`` (an ``AssertionError``) when the
        matcher fails, and skips the test when an ``or_skip()`` matcher fails.
    """

    def _must(value: Any, matcher: Any, *, description: str | None = None) -> None:
        try:
            raise_for_outcome(must_satisfy(value, matcher, description=description))
        except ExampleSkipped as skip:
            pytest.skip(str(skip))

    return _must
