"""Pytest configuration and shared fixtures for the revmark test suite."""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from revmark import Converter, ConverterOptions

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def converter() -> Converter:
    """Provide a converter with default options."""
    return Converter()


@pytest.fixture
def gfm_converter() -> Converter:
    """Provide a converter producing GitHub-flavored Markdown."""
    return Converter(ConverterOptions(github_flavored=True))
