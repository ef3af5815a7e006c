"""Pytest configuration for conformance tests."""

import pytest
from tests.conformance.runners.cli_runner import CliRunner
from tests.conformance.runners.library_runner import LibraryRunner


def get_available_runners():
    """Return list of available conformance runners."""
    runners = [LibraryRunner(), CliRunner()]
    return runners


@pytest.fixture(params=get_available_runners(), ids=lambda r: r.name)
def runner(request):
    """Provide conformance runner for testing.

    This fixture is parametrized to run tests against all available runners.
    Currently includes:
    - library: calls the adamscript parser in-process
    - cli: goes through ``adamscript ast`` and reads back the JSON dump
    """
    return request.param
