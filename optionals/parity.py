"""
parity.py - The same scenarios, written against the Java-style API

The scenarios in scenarios.py stick to the operations std::optional offers.
These counterparts use the Java-flavoured additions of Optional instead:
of / of_nullable / empty, or_, value_or_raise, if_present, map and filter.

Every scenario prints its title and underline, then one line per check in
the form "<description>: <outcome>". run_parity_examples() runs them in the
order of PARITY_SCENARIOS.
"""

from __future__ import annotations
from typing import Callable, Tuple

from .core import EmptyAccess, NullValueError, Optional
from .records import (
    Car, Truck, LOUD_CAR, REASONABLE_CAR, HUGE_CAR,
    have_fun, produce_truck, repository_find_by_model, truck_from_car,
)
from .scenarios import print_title, run_scenarios


def _outcome(description: str, outcome) -> None:
    print(f"{description}: {outcome}")


def _raised(fn: Callable[[], object]):
    """Call fn and return the exception it raised, or None."""
    try:
        fn()
    except Exception as e:
        return e
    return None


# ============================================================================
# SCENARIOS
# ============================================================================

def optional_of_null_java():
    print_title("optional_of_null_java")

    # When
    null_error = _raised(lambda: Optional.of(None))
    null_opt = Optional.of_nullable(None)
    empty_opt = Optional.empty()

    # Then
    _outcome("of(None) raises NullValueError", isinstance(null_error, NullValueError))
    _outcome("of_nullable(None) is empty", not null_opt.has_value())
    _outcome("empty() is empty", not empty_opt.has_value())


def optional_of_null_usage_java():
    print_title("optional_of_null_usage_java")

    # Given
    null_opt = Optional[Car].empty()

    # When
    null_or = null_opt.or_(produce_truck)
    null_or_else = null_opt.value_or(REASONABLE_CAR)
    null_or_else_raise = _raised(lambda: null_opt.value_or_raise(ValueError))
    null_if_present = _raised(lambda: null_opt.if_present(have_fun))
    null_get = _raised(null_opt.value)

    # Then
    _outcome("or_() falls back to produce_truck()", null_or.value() == HUGE_CAR)
    _outcome("value_or() returns the fallback", null_or_else == REASONABLE_CAR)
    _outcome("value_or_raise() raises ValueError", isinstance(null_or_else_raise, ValueError))
    _outcome("if_present() skips the action", null_if_present is None)
    _outcome("value() raises EmptyAccess", isinstance(null_get, EmptyAccess))


def optional_of_value_usage_java():
    print_title("optional_of_value_usage_java")

    # Given
    hyundai_opt = Optional.of(LOUD_CAR)

    # When
    hyundai_or = hyundai_opt.or_(produce_truck)
    hyundai_or_else = hyundai_opt.value_or(REASONABLE_CAR)
    hyundai_or_else_raise = hyundai_opt.value_or_raise(ValueError)
    hyundai_if_present = _raised(lambda: hyundai_opt.if_present(have_fun))

    # Then
    _outcome("or_() keeps the original", hyundai_or == hyundai_opt)
    _outcome("value_or() returns the value", hyundai_or_else == LOUD_CAR)
    _outcome("value_or_raise() returns the value", hyundai_or_else_raise == LOUD_CAR)
    _outcome("if_present() runs the action", hyundai_if_present)


def optional_of_value_other_usage_java():
    print_title("optional_of_value_other_usage_java")

    # Given
    null_opt = Optional[Car].empty()
    hyundai_opt = Optional.of(LOUD_CAR)

    # When
    manufacturer = hyundai_opt.map(lambda car: car.manufacturer)
    null_map = null_opt.map(lambda car: car.manufacturer)
    filtered = hyundai_opt.filter(lambda car: car.model.casefold() == "i30 n")

    # Then
    _outcome("map() extracts the manufacturer", manufacturer == Optional.of("Hyundai"))
    _outcome("map() on empty stays empty", not null_map.has_value())
    _outcome("filter() lets the i30 N pass", filtered == hyundai_opt)


def bouncer_patterns_java():
    print_title("bouncer_patterns_java")

    # Given
    hyundai_opt = Optional.of(LOUD_CAR)

    # has_value() check, then value()
    if not hyundai_opt.has_value():
        raise EmptyAccess("bouncer let an empty optional through")
    value1 = hyundai_opt.value()
    _outcome("value() after has_value()", value1)

    # value_or_raise() checks and returns in one step
    value2 = hyundai_opt.value_or_raise(EmptyAccess)
    _outcome("value_or_raise()", value2)


def fake_repository_return_value_java():
    print_title("fake_repository_return_value_java")

    # Given
    user_search_string = "raptor"

    # When
    truck = (repository_find_by_model(user_search_string)
             .map(truck_from_car)
             .value_or_raise(ValueError))

    # Then
    _outcome("repository lookup mapped to a truck", isinstance(truck, Truck))
    _outcome("truck", truck)


def direct_value_access_java():
    print_title("direct_value_access_java")

    # Given
    hyundai_opt = Optional.of(LOUD_CAR)

    # When
    manufacturer = hyundai_opt.value().manufacturer

    # Then
    _outcome("value() is the only way in Java", manufacturer)


# ============================================================================
# DRIVER
# ============================================================================

PARITY_SCENARIOS: Tuple[Callable[[], None], ...] = (
    optional_of_null_java,
    optional_of_null_usage_java,
    optional_of_value_usage_java,
    optional_of_value_other_usage_java,
    bouncer_patterns_java,
    fake_repository_return_value_java,
    direct_value_access_java,
)


def run_parity_examples() -> None:
    """Run every scenario in PARITY_SCENARIOS."""
    run_scenarios(PARITY_SCENARIOS)
