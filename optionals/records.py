"""
records.py - Sample records carried by the optionals in the showcase

Provides:
- Car and Truck: immutable value records with field-wise equality
- The constant fleet shared read-only by every scenario
- Factory helpers that return optionals of those records
"""

from __future__ import annotations
from dataclasses import dataclass

from .core import NULLOPT, Optional, make_optional


# ============================================================================
# RECORDS
# ============================================================================

@dataclass(frozen=True, slots=True)
class Car:
    """
    A car identified by manufacturer and model.

    Renders as "{manufacturer} {model}".
    """
    manufacturer: str
    model: str

    def __str__(self) -> str:
        return f"{self.manufacturer} {self.model}"


@dataclass(frozen=True, slots=True)
class Truck:
    """
    A truck identified by manufacturer, model and size.

    Renders size first: "{size} {manufacturer} {model}".
    """
    manufacturer: str
    model: str
    size: str

    def __str__(self) -> str:
        return f"{self.size} {self.manufacturer} {self.model}"


# ============================================================================
# CONSTANT FLEET
# ============================================================================

LOUD_CAR = Car("Hyundai", "i30 N")
REASONABLE_CAR = Car("Volkswagen", "Golf")
HUGE_CAR = Car("Ford", "Raptor")

# Size given to trucks converted from cars by truck_from_car().
CONVERTED_TRUCK_SIZE = "HUGE"


# ============================================================================
# FACTORIES
# ============================================================================

def make_empty_car() -> Optional[Car]:
    """Return an empty car optional, built straight from the absent marker."""
    return Optional[Car](NULLOPT)


def make_empty_truck() -> Optional[Truck]:
    return Optional[Truck](NULLOPT)


def produce_truck() -> Optional[Car]:
    """Return HUGE_CAR wrapped in an optional (a car, despite the name)."""
    return make_optional(HUGE_CAR)


def repository_find_by_model(model: str) -> Optional[Car]:
    """
    Look up a car by model name, case-insensitively.

    Stands in for a repository query: only "Raptor" is known.
    """
    if model.casefold() == HUGE_CAR.model.casefold():
        return Optional.of(HUGE_CAR)
    return Optional.empty()


def truck_from_car(car: Car) -> Truck:
    return Truck(car.manufacturer, car.model, CONVERTED_TRUCK_SIZE)


def have_fun(car: Car | None) -> None:
    """
    Action used to observe whether Optional.if_present() ran.

    Raises:
        ValueError: If car is None.
        RuntimeError: Always otherwise, carrying str(car) as the message.
    """
    if car is None:
        raise ValueError("This ain't not fun")
    raise RuntimeError(str(car))
