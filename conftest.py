"""
Shared pytest fixtures.
"""
import pytest

from home.controllers import HomeController


@pytest.fixture
def home_controller():
    """HomeController built the way a test harness builds it: no arguments."""
    return HomeController()
