"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest

PROGRAM = """
let five = 5;
let ten = 10;
let add = fn(x, y) {
    x + y;
};
let result = add(five, ten);
"""


@pytest.fixture
def small_program() -> str:
    return PROGRAM


@pytest.fixture
def large_program() -> str:
    """~100KB of source."""
    return PROGRAM * 800
