"""Pytest configuration for candlefeed test suite."""

from __future__ import annotations

import pytest

from candlefeed.core.models.candle import RawQuoteBlock
from tests.helpers import StubProvider


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register command-line options for controlling integration tests."""

    parser.addoption(
        "--candlefeed-run-integration",
        action="store_true",
        default=False,
        help="Run candlefeed integration tests that require network access.",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: marks candlefeed tests requiring network or external services",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip integration tests unless explicitly requested."""

    if config.getoption("--candlefeed-run-integration"):
        return

    skip_integration = pytest.mark.skip(reason="integration tests require --candlefeed-run-integration")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


@pytest.fixture
def scenario_block() -> RawQuoteBlock:
    """Two consecutive UTC days (Tue 2023-11-14, Wed 2023-11-15)."""
    return RawQuoteBlock(
        timestamp=[1700000000, 1700086400],
        open=[100, 102],
        high=[105, 106],
        low=[99, 101],
        close=[104, 103],
        volume=[1000, 1100],
    )


@pytest.fixture
def stub_provider(scenario_block: RawQuoteBlock) -> StubProvider:
    return StubProvider(scenario_block)
