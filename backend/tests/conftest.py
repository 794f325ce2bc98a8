"""Shared test configuration and pytest markers."""

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "invariant: sweeps many inputs to check report-wide invariants"
    )
