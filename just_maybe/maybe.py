from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from .logger import ConsoleLogger, get_logger

T = TypeVar("T")
A = TypeVar("A")
B = TypeVar("B")
U = TypeVar("U")

MaybeMapping = Callable[[A], B]
MaybePredicate = Callable[[T], bool]


class InvalidExtraction(Exception):
    def __init__(self, message: str = "Cannot get the value of an Absent"):
        super().__init__(message); self.message = message


class Maybe(Generic[T]):
    """Optional value: either ``Present(value)`` or ``Absent``.

    Every operation is defined here and switches on :meth:`is_just`; the two
    variants only carry the tag and the payload. Containers are immutable and
    each operation returns a container (or a raw value for the extractors).

    Example:
        ```python
        from_nullable(user.get("age")).filter(lambda a: a >= 18).map(str).get_or_else("minor")
        ```
    """

    @staticmethod
    def from_nullable(v: Optional[T]) -> "Maybe[T]":
        return from_nullable(v)

    @staticmethod
    def just(v: T) -> "Present[T]":
        return Present(v)

    @staticmethod
    def nothing() -> "Absent[Any]":
        return NOTHING

    def is_just(self) -> bool: raise NotImplementedError
    def is_nothing(self) -> bool: return not self.is_just()

    def map(self, f: MaybeMapping[T, U]) -> "Maybe[U]":
        if self.is_just():
            return Present(f(self.value))  # type: ignore[attr-defined]
        return NOTHING

    def chain(self, f: Callable[[T], "Maybe[U]"]) -> "Maybe[U]":
        return self.map(f).join()

    def join(self: "Maybe[Maybe[U]]") -> "Maybe[U]":
        if self.is_nothing():
            return NOTHING
        inner = self.value  # type: ignore[attr-defined]
        if not isinstance(inner, Maybe):
            raise TypeError(f"join expects a nested Maybe, got {type(inner).__name__}")
        return inner

    def filter(self, predicate: MaybePredicate[T]) -> "Maybe[T]":
        if self.is_just() and predicate(self.value):  # type: ignore[attr-defined]
            return Present(self.value)  # type: ignore[attr-defined]
        return NOTHING

    def ap(self: "Maybe[Callable[[A], B]]", other: "Maybe[A]") -> "Maybe[B]":
        # other is only looked at once we know there is a function to apply
        if self.is_just() and other.is_just():
            return Present(self.value(other.value))  # type: ignore[attr-defined]
        return NOTHING

    def fork(self, on_present: Callable[[T], B], on_absent: Callable[[], B]) -> B:
        if self.is_just():
            return on_present(self.value)  # type: ignore[attr-defined]
        return on_absent()

    def get(self) -> T:
        if self.is_just():
            return self.value  # type: ignore[attr-defined]
        raise InvalidExtraction()

    def get_or_else(self, default: U) -> T | U:
        return self.value if self.is_just() else default  # type: ignore[attr-defined]

    def tap(self, f: Callable[[T], Any]) -> "Maybe[T]":
        if self.is_just():
            f(self.value)  # type: ignore[attr-defined]
        return self

    def trace(self, label: str, logger: Optional[ConsoleLogger] = None) -> "Maybe[T]":
        log = logger if logger is not None else get_logger()
        log.debug(f"{label} {self}", variant=type(self).__name__)
        return self


@dataclass(frozen=True, repr=False)
class Present(Maybe[T]):
    value: T

    @staticmethod
    def create(v: B) -> "Present[B]":
        return Present(v)

    def is_just(self) -> bool: return True
    def __str__(self) -> str: return f"Present({self.value})"
    def __repr__(self) -> str: return f"Present({self.value!r})"


@dataclass(frozen=True, repr=False)
class Absent(Maybe[T]):
    @staticmethod
    def create() -> "Absent[Any]":
        return NOTHING

    def is_just(self) -> bool: return False
    def __str__(self) -> str: return "Absent"
    def __repr__(self) -> str: return "Absent"


NOTHING: Absent[Any] = Absent()

# Just/Nothing spellings
Just = Present
Nothing = Absent


def from_nullable(v: Optional[T]) -> Maybe[T]:
    return Present(v) if v is not None else NOTHING


def just(v: T) -> Present[T]:
    return Present(v)


def nothing() -> Absent[Any]:
    return NOTHING
