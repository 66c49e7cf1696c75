"""Shared test fixtures for designate-acme-solver."""

import webhook_app as _app


def pytest_runtest_setup(item):
    """Reset module-level caches between tests."""
    _app._solver = None
