"""
Optional results.

Terminal operations that may have nothing to return (min, max, find_first,
reduce without identity) return an OptionalValue instead of None.

    OptionalValue.of(22)        -> present
    OptionalValue.empty()       -> absent
    OptionalValue.of_nullable(x) -> absent when x is None

Callers check is_present() before get(). An unchecked get() on an empty
optional raises NoSuchElementError and is left to propagate.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from streamlab.errors import NoSuchElementError

_MISSING = object()


@dataclass(frozen=True)
class OptionalValue:
    """
    A container that either holds one non-None value or is empty.

    IMPORTANT:
        This object is immutable (frozen=True).
        Two empty optionals are equal; two present optionals are equal
        when their values are equal.
    """

    _value: Any = _MISSING

    @classmethod
    def of(cls, value: Any) -> "OptionalValue":
        if value is None:
            raise TypeError("OptionalValue.of() requires a non-None value")
        return cls(value)

    @classmethod
    def of_nullable(cls, value: Any) -> "OptionalValue":
        if value is None:
            return cls()
        return cls(value)

    @classmethod
    def empty(cls) -> "OptionalValue":
        return cls()

    def is_present(self) -> bool:
        return self._value is not _MISSING

    def is_empty(self) -> bool:
        return self._value is _MISSING

    def get(self) -> Any:
        """
        Return the held value.

        Raises:
            NoSuchElementError: if the optional is empty
        """
        if self.is_empty():
            raise NoSuchElementError("No value present")
        return self._value

    def or_else(self, other: Any) -> Any:
        return self._value if self.is_present() else other

    def or_else_get(self, supplier: Callable[[], Any]) -> Any:
        return self._value if self.is_present() else supplier()

    def or_else_raise(self, factory: Optional[Callable[[], BaseException]] = None) -> Any:
        if self.is_present():
            return self._value
        if factory is None:
            raise NoSuchElementError("No value present")
        raise factory()

    def if_present(self, consumer: Callable[[Any], None]) -> None:
        if self.is_present():
            consumer(self._value)

    def if_present_or_else(self, consumer: Callable[[Any], None], empty_action: Callable[[], None]) -> None:
        if self.is_present():
            consumer(self._value)
        else:
            empty_action()

    def map(self, fn: Callable[[Any], Any]) -> "OptionalValue":
        if self.is_empty():
            return self
        return OptionalValue.of_nullable(fn(self._value))

    def flat_map(self, fn: Callable[[Any], "OptionalValue"]) -> "OptionalValue":
        if self.is_empty():
            return self
        result = fn(self._value)
        if not isinstance(result, OptionalValue):
            raise TypeError(f"flat_map function must return OptionalValue, got {type(result)}")
        return result

    def filter(self, predicate: Callable[[Any], bool]) -> "OptionalValue":
        if self.is_present() and predicate(self._value):
            return self
        return OptionalValue.empty()

    def __repr__(self) -> str:
        if self.is_empty():
            return "OptionalValue.empty"
        return f"OptionalValue[{self._value!r}]"
