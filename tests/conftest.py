"""Pytest configuration and shared fixtures for loadable tests."""

import pytest


@pytest.fixture
def all_variants():
    """One instance of every variant, int values and str errors."""
    from loadable import Failure, Idle, Loading, ReloadFailure, Reloading, Success

    return [
        Idle(),
        Loading(),
        Success(42),
        Failure("boom"),
        Reloading(7),
        ReloadFailure("boom", 7),
    ]
