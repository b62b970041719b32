"""
scenarios.py - Labeled demonstrations of the optional container

Each scenario prints its own title, an underline of the same length and the
outcome lines of the idiom it shows. The driver run_all_examples() runs them
in the order of SCENARIOS and separates them with two blank lines.

The outcome strings are printed verbatim, spelling included, since the
output of the driver is checked line by line.
"""

from __future__ import annotations
from typing import Callable, Tuple

from .core import NULLOPT, EmptyAccess, Optional, make_optional
from .records import Car, LOUD_CAR, REASONABLE_CAR, make_empty_car


# ============================================================================
# CONSTANTS
# ============================================================================

UNDERLINE_CHAR = "-"

# Printed after every scenario; with print()'s own newline this is two blank lines.
SCENARIO_SEPARATOR = "\n"


# ============================================================================
# HELPERS
# ============================================================================

def print_title(title: str) -> None:
    """Print a scenario title and its dashed underline."""
    print(title)
    print(UNDERLINE_CHAR * len(title))


# ============================================================================
# SCENARIOS
# ============================================================================

def optional_of_null():
    """Four ways of building an empty optional."""
    print_title("optional_of_null")

    # The marker on its own only means "nothing".
    null_opt = NULLOPT
    null_opt_const = Optional[Car](NULLOPT)
    null_opt_method = make_empty_car()
    null_opt_obj1 = Optional[Car]()
    null_opt_obj2 = Optional[Car](null_opt)

    if not null_opt_const.has_value():
        print("null_opt_const has no value")

    if not null_opt_method.has_value():
        print("null_opt_method has no value")

    if not null_opt_obj1.has_value():
        print("null_opt_obj1 has no value")

    if not null_opt_obj2.has_value():
        print("null_opt_obj2 has no value")


def optional_of_null_usage():
    """value_or() and value() on an empty optional."""
    print_title("optional_of_null_usage")

    # Given
    null_opt = make_empty_car()

    # When
    null_value_or = null_opt.value_or(REASONABLE_CAR)
    try:
        null_opt.value()
    except EmptyAccess:
        print("value() throws if optional is empty")

    # Then
    if null_value_or == REASONABLE_CAR:
        print("value_or() gets default object if optional is empty")


def optional_of_value_usage():
    """value_or() on a filled optional."""
    print_title("optional_of_value_usage")

    # Given
    hyundai_opt = make_optional(LOUD_CAR)

    # When
    hyundai_value_or = hyundai_opt.value_or(REASONABLE_CAR)

    # Then
    if hyundai_value_or == LOUD_CAR:
        print("value_or() gets object if optional is not empty")


def optional_of_value_other_usage():
    print_title("optional_of_value_other_usage")

    print("There's nothing std::optional has to offer here")


def bouncer_patterns():
    """Check has_value() before touching the contained value."""
    print_title("bouncer_patterns")

    # Given
    hyundai_opt = make_optional(LOUD_CAR)

    # When
    if not hyundai_opt.has_value():
        print("ERROR: If you see that then something is wrong")
    value = hyundai_opt.manufacturer
    print(f"Hyunday manufacturer value is {value} (surprise)")


def fake_repository_return_value():
    print_title("fake_repository_return_value")

    print("Didn't bother to write helper methods; ")
    print("std::optional has no map() or filter() like Java")


def direct_value_access():
    """value(), unpacking and attribute access all reach the same car."""
    print_title("direct_value_access")

    # Given
    hyundai_opt = make_optional(LOUD_CAR)

    # When
    manufacturer1 = hyundai_opt.value().manufacturer
    (car,) = hyundai_opt
    manufacturer2 = car.manufacturer
    manufacturer3 = hyundai_opt.manufacturer

    # Then
    if (manufacturer1 == manufacturer2
            and manufacturer2 == manufacturer3
            and manufacturer3 == "Hyundai"):
        print("C++ offers some nicer ways to directly access the object")


# ============================================================================
# DRIVER
# ============================================================================

SCENARIOS: Tuple[Callable[[], None], ...] = (
    optional_of_null,
    optional_of_null_usage,
    optional_of_value_usage,
    optional_of_value_other_usage,
    bouncer_patterns,
    fake_repository_return_value,
    direct_value_access,
)


def run_scenarios(scenarios) -> None:
    """Run scenarios in order, printing two blank lines after each."""
    for scenario in scenarios:
        scenario()
        print(SCENARIO_SEPARATOR)


def run_all_examples() -> None:
    """Run every scenario in SCENARIOS."""
    run_scenarios(SCENARIOS)
