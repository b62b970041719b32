"""
Core types for the optional value showcase.

This module provides the container the rest of the package demonstrates:
1. Absent marker: NULLOPT, the typeless singleton meaning "no value"
2. Container: Optional[T], either empty or filled with a single value
3. Factories: make_optional() and the Optional.of / of_nullable / empty family
4. Exceptions: OptionalError and its specific subclasses

An Optional never changes state after construction. The constructor and
make_optional() store a deep copy of the value, so mutating the original
object afterwards does not reach the stored one; values that cannot be
copied are stored as-is. The Java-style factories (of, of_nullable) and
map() keep a reference instead.
"""

from __future__ import annotations
import copy
from typing import Any, Callable, Generic, Iterator, TypeVar

T = TypeVar("T")
U = TypeVar("U")


# ============================================================================
# EXCEPTIONS
# ============================================================================

class OptionalError(Exception):
    """Base exception for all optional-related errors."""
    pass


class EmptyAccess(OptionalError):
    """Raised when value() is called on an empty optional."""
    pass


class NullValueError(OptionalError, ValueError):
    """Raised when Optional.of() is given None."""
    pass


# ============================================================================
# ABSENT MARKER
# ============================================================================

class NullOpt:
    """
    Type of the absent marker.

    Only one instance ever exists; constructing the class again returns it.
    The marker is falsy and carries no element type, so the same object
    builds an empty Optional of any T.
    """

    __slots__ = ()
    _instance = None

    def __new__(cls) -> NullOpt:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "nullopt"

    def __reduce__(self):
        return (NullOpt, ())

    def __copy__(self) -> NullOpt:
        return self

    def __deepcopy__(self, memo) -> NullOpt:
        return self


NULLOPT = NullOpt()


def _copy_value(value: Any, memo=None) -> Any:
    """
    Deep-copy value for storage.

    Objects that cannot be copied (locks, generators, open files) raise
    TypeError from copy.deepcopy and are stored as-is instead.
    """
    try:
        return copy.deepcopy(value, memo)
    except TypeError:
        return value


# ============================================================================
# OPTIONAL CONTAINER
# ============================================================================

class Optional(Generic[T]):
    """
    A container that either holds one value of type T or holds nothing.

    Construction:
        Optional()              -> empty
        Optional(NULLOPT)       -> empty
        Optional(value)         -> filled with a copy of value
        Optional.of(value)      -> filled with value itself, no copy
        Optional[Car](NULLOPT)  -> empty, element type spelled out

    None is an ordinary value for the constructor; use Optional.of_nullable()
    when None should mean "absent".

    Access:
        opt.has_value() / bool(opt)   state test
        opt.value()                   value, or EmptyAccess when empty
        opt.value_or(fallback)        value, or fallback when empty
        (car,) = opt                  dereference by unpacking
        opt.manufacturer              attribute of the contained value

    Unpacking or attribute access on an empty optional is not supported and
    fails with whatever the interpreter raises (ValueError, AttributeError).

    Attribute access only reaches names the container does not define itself.
    A contained object with a field named like a container method (value,
    map, filter, of, empty, or_ and the rest) is shadowed by the Optional
    method of that name; read such fields through opt.value().

    Example:
        opt = make_optional(Car("Hyundai", "i30 N"))
        opt.value_or(Car("Volkswagen", "Golf")).model   # "i30 N"
    """

    __slots__ = ("_value", "_engaged")

    def __init__(self, value: Any = NULLOPT) -> None:
        if value is NULLOPT:
            object.__setattr__(self, "_value", None)
            object.__setattr__(self, "_engaged", False)
        else:
            object.__setattr__(self, "_value", _copy_value(value))
            object.__setattr__(self, "_engaged", True)

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def _holding(cls, value: Any) -> Optional[T]:
        # Filled optional that keeps a reference to value instead of a copy.
        if value is NULLOPT:
            return cls()
        opt = object.__new__(cls)
        object.__setattr__(opt, "_value", value)
        object.__setattr__(opt, "_engaged", True)
        return opt

    @classmethod
    def empty(cls) -> Optional[T]:
        """Return an empty optional."""
        return cls()

    @classmethod
    def of(cls, value: T) -> Optional[T]:
        """
        Return an optional holding value itself, without copying it.

        Raises:
            NullValueError: If value is None.
        """
        if value is None:
            raise NullValueError("Optional.of() requires a value, got None")
        return cls._holding(value)

    @classmethod
    def of_nullable(cls, value: T | None) -> Optional[T]:
        """Return an empty optional for None, one holding value otherwise."""
        if value is None:
            return cls()
        return cls._holding(value)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def has_value(self) -> bool:
        """Return True if the optional holds a value."""
        return self._engaged

    def __bool__(self) -> bool:
        return self._engaged

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    def value(self) -> T:
        """
        Return the contained value.

        The stored object itself is returned, not a copy.

        Raises:
            EmptyAccess: If the optional is empty.
        """
        if not self._engaged:
            raise EmptyAccess("value() called on an empty optional")
        return self._value

    def value_or(self, fallback: T) -> T:
        """Return the contained value, or fallback if the optional is empty."""
        if self._engaged:
            return self._value
        return fallback

    def value_or_else(self, supplier: Callable[[], T]) -> T:
        """Return the contained value, or supplier() if the optional is empty."""
        if self._engaged:
            return self._value
        return supplier()

    def value_or_raise(self, exc_factory: Callable[[], BaseException] = EmptyAccess) -> T:
        """
        Return the contained value, or raise exc_factory() if empty.

        exc_factory is any zero-argument callable returning an exception,
        usually the exception class itself.
        """
        if self._engaged:
            return self._value
        raise exc_factory()

    def __iter__(self) -> Iterator[T]:
        if self._engaged:
            yield self._value

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails, i.e. for attributes of the
        # contained value. Private names never delegate.
        if name.startswith("_"):
            raise AttributeError(name)
        if not self._engaged:
            raise AttributeError(f"empty optional has no attribute {name!r}")
        return getattr(self._value, name)

    # ------------------------------------------------------------------
    # Combinators
    # ------------------------------------------------------------------

    def or_(self, supplier: Callable[[], Optional[T]]) -> Optional[T]:
        """Return self if filled, otherwise the optional produced by supplier()."""
        if self._engaged:
            return self
        return supplier()

    def if_present(self, action: Callable[[T], Any]) -> None:
        """Call action(value) if the optional is filled."""
        if self._engaged:
            action(self._value)

    def map(self, fn: Callable[[T], U]) -> Optional[U]:
        """
        Apply fn to the contained value.

        An empty optional stays empty. A None result from fn yields an empty
        optional.
        The result of fn is stored as-is, not copied.
        """
        if not self._engaged:
            return Optional()
        return Optional.of_nullable(fn(self._value))

    def filter(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Return self if filled and predicate(value) holds, otherwise empty."""
        if self._engaged and predicate(self._value):
            return self
        return Optional()

    # ------------------------------------------------------------------
    # Comparison and representation
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if other is NULLOPT:
            return not self._engaged
        if not isinstance(other, Optional):
            return NotImplemented
        if self._engaged != other._engaged:
            return False
        return not self._engaged or self._value == other._value

    def __hash__(self) -> int:
        if not self._engaged:
            return hash(NULLOPT)
        return hash((Optional, self._value))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Optional is immutable, cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Optional is immutable, cannot delete {name!r}")

    def __copy__(self) -> Optional[T]:
        return self

    def __deepcopy__(self, memo) -> Optional[T]:
        result = object.__new__(type(self))
        memo[id(self)] = result
        object.__setattr__(result, "_engaged", self._engaged)
        object.__setattr__(result, "_value", _copy_value(self._value, memo))
        return result

    def __reduce__(self):
        if not self._engaged:
            return (Optional, ())
        return (Optional, (self._value,))

    def __repr__(self) -> str:
        if not self._engaged:
            return "Optional(nullopt)"
        return f"Optional({self._value!r})"


def make_optional(value: T) -> Optional[T]:
    """Return an optional filled with a copy of value."""
    return Optional(value)
