"""
Root pytest configuration and shared fixtures.

Tests marked ``integration`` talk to a live notification service and only run
when pytest is invoked with ``--integration``.
"""

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run integration tests against a live notification service",
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--integration"):
        return

    skip_integration = pytest.mark.skip(reason="live service tests need --integration")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)
