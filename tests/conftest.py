"""
conftest.py - Shared pytest fixtures for the optionals tests

Provides common fixtures used across unit, conformance and functional tests:
- Optionals of the constant fleet (empty, filled with each car)
- Output capture helpers for scenarios and drivers
"""

import pytest
from typing import Callable

from optionals import (
    Optional, NULLOPT, Car, Truck,
    LOUD_CAR, REASONABLE_CAR, HUGE_CAR,
    make_optional,
)


# =============================================================================
# OPTIONAL FIXTURES
# =============================================================================

@pytest.fixture
def empty_car_opt():
    """Empty Optional[Car] built from the absent marker."""
    return Optional[Car](NULLOPT)


@pytest.fixture
def empty_truck_opt():
    """Empty Optional[Truck] built from the absent marker."""
    return Optional[Truck](NULLOPT)


@pytest.fixture
def hyundai_opt():
    """Optional filled with LOUD_CAR."""
    return make_optional(LOUD_CAR)


@pytest.fixture
def fleet():
    """The three constant cars, in declaration order."""
    return [LOUD_CAR, REASONABLE_CAR, HUGE_CAR]


# =============================================================================
# OUTPUT CAPTURE
# =============================================================================

@pytest.fixture
def capture_output(capsys) -> Callable[[Callable[[], None]], str]:
    """
    Run a zero-argument callable and return everything it printed.

    Example:
        output = capture_output(optional_of_null)
    """
    def _capture(fn: Callable[[], None]) -> str:
        capsys.readouterr()
        fn()
        return capsys.readouterr().out

    return _capture
