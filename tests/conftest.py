"""Pytest configuration and shared fixtures for the html2md test suite.

This module registers the custom markers, configures Hypothesis profiles
and provides fixtures used across unit and integration tests.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from html2md.state import ConversionState

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def state() -> ConversionState:
    """Provide a fresh conversion state with default options."""
    return ConversionState()
