# tests/conftest.py
"""
Shared fixtures for the symbolic engine tests.
"""

import pytest

from Symbolic import Variable


@pytest.fixture
def x():
    return Variable("x")


@pytest.fixture
def y():
    return Variable("y")
