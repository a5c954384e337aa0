#!/usr/bin/env python3
"""
Test suite for CareMatch.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Skip the HTTP layer
    python -m pytest tests/ -v -m "not web"

    # Using unittest
    python -m unittest discover tests -v

Engine tests pass an explicit evaluation time (tests.mocks.snapshot_factories.AS_OF)
so child ages and document expirations do not drift with the calendar.
"""
