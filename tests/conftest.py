"""
Pytest configuration.

This file provides pytest-specific configuration.
For shared snapshot factories, see tests/mocks/snapshot_factories.py
"""


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "web: marks tests that exercise the HTTP layer (deselect with '-m \"not web\"')"
    )
