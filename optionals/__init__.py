"""
optionals - Optional value container showcase

A container that either holds a value or holds nothing, plus labeled
demonstrations of how to build, test and read it.

Usage:
    from optionals import Optional, NULLOPT, EmptyAccess, make_optional, Car

    empty = Optional[Car](NULLOPT)
    empty.has_value()                       # False
    empty.value_or(Car("Volkswagen", "Golf"))

    filled = make_optional(Car("Hyundai", "i30 N"))
    filled.manufacturer                     # "Hyundai"

    try:
        empty.value()
    except EmptyAccess:
        ...

Run the demonstrations:
    from optionals import run_all_examples
    run_all_examples()
"""

# Core types
from .core import (
    Optional,
    NullOpt,
    NULLOPT,
    make_optional,
    OptionalError,
    EmptyAccess,
    NullValueError,
)

# Records
from .records import (
    Car,
    Truck,
    LOUD_CAR,
    REASONABLE_CAR,
    HUGE_CAR,
    CONVERTED_TRUCK_SIZE,
    make_empty_car,
    make_empty_truck,
    produce_truck,
    repository_find_by_model,
    truck_from_car,
    have_fun,
)

# Scenarios
from .scenarios import (
    optional_of_null,
    optional_of_null_usage,
    optional_of_value_usage,
    optional_of_value_other_usage,
    bouncer_patterns,
    fake_repository_return_value,
    direct_value_access,
    print_title,
    run_scenarios,
    run_all_examples,
    SCENARIOS,
)

# Java-style parity scenarios
from .parity import (
    run_parity_examples,
    PARITY_SCENARIOS,
)

__all__ = [
    # Core
    'Optional', 'NullOpt', 'NULLOPT', 'make_optional',
    'OptionalError', 'EmptyAccess', 'NullValueError',
    # Records
    'Car', 'Truck', 'LOUD_CAR', 'REASONABLE_CAR', 'HUGE_CAR', 'CONVERTED_TRUCK_SIZE',
    'make_empty_car', 'make_empty_truck', 'produce_truck',
    'repository_find_by_model', 'truck_from_car', 'have_fun',
    # Scenarios
    'optional_of_null', 'optional_of_null_usage', 'optional_of_value_usage',
    'optional_of_value_other_usage', 'bouncer_patterns',
    'fake_repository_return_value', 'direct_value_access',
    'print_title', 'run_scenarios', 'run_all_examples', 'SCENARIOS',
    # Parity
    'run_parity_examples', 'PARITY_SCENARIOS',
]

__version__ = '1.0.0'
