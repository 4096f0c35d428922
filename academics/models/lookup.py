"""
Explicit found / not-found result for lookups.

Collaborators and the registry return a Lookup instead of None so the
caller has to decide what "absent" means at the call site.
"""

from typing import Generic, TypeVar

T = TypeVar("T")

_MISSING = object()


class Lookup(Generic[T]):
    """
    Result of a lookup that may not find anything.

    Usage:
        result = directory.find_student_by_id(7)
        if not result:
            raise StudentNotFoundError(...)
        student = result.value
    """

    __slots__ = ("_value",)

    def __init__(self, value=_MISSING):
        self._value = value

    @classmethod
    def found(cls, value: T) -> "Lookup[T]":
        if value is None:
            raise ValueError("Lookup.found() requires a value; use Lookup.missing()")
        return cls(value)

    @classmethod
    def missing(cls) -> "Lookup[T]":
        return cls()

    @classmethod
    def of(cls, value) -> "Lookup[T]":
        """Wrap a possibly-None value."""
        return cls.missing() if value is None else cls(value)

    @property
    def is_found(self) -> bool:
        return self._value is not _MISSING

    @property
    def value(self) -> T:
        if self._value is _MISSING:
            raise LookupError("Lookup has no value")
        return self._value

    def value_or(self, default):
        return self._value if self.is_found else default

    def __bool__(self):
        return self.is_found

    def __eq__(self, other):
        if not isinstance(other, Lookup):
            return NotImplemented
        return self._value is other._value or self._value == other._value

    def __repr__(self):
        if self.is_found:
            return f"Lookup.found({self._value!r})"
        return "Lookup.missing()"
