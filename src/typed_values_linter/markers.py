"""
Runtime value markers.

A value class wraps one primitive or list and is tagged with a marker::

    @final
    @StringBased()
    @dataclass(frozen=True)
    class EmailAddress:
        value: str

        @private
        def __init__(self, value: str) -> None:
            object.__setattr__(self, "value", value)

    email = instantiate(EmailAddress, "jane@example.com")

The linter checks the structure of such classes; the markers below only record
themselves on the class and check the primitive type of the wrapped value.
"""

from typing import Any, TypeVar

T = TypeVar("T")
F = TypeVar("F")

MARKER_ATTRIBUTE = "__typed_value_marker__"
VISIBILITY_ATTRIBUTE = "__constructor_visibility__"


class TypeBased:
    """Common marker type. Subclasses name the primitive they wrap."""

    accepts: tuple[type, ...] = (object,)

    def __call__(self, cls: type[T]) -> type[T]:
        setattr(cls, MARKER_ATTRIBUTE, self)
        return cls

    def coerce(self, value: Any) -> Any:
        if isinstance(value, bool) and bool not in self.accepts:
            raise TypeError(f"{type(self).__name__} does not accept bool values")
        if not isinstance(value, self.accepts):
            expected = " or ".join(t.__name__ for t in self.accepts)
            raise TypeError(
                f"{type(self).__name__} expects {expected}, got {type(value).__name__}"
            )
        return value


class StringBased(TypeBased):
    accepts = (str,)


class IntegerBased(TypeBased):
    accepts = (int,)


class FloatBased(TypeBased):
    accepts = (float, int)

    def coerce(self, value: Any) -> float:
        return float(super().coerce(value))


class ListBased(TypeBased):
    accepts = (list, tuple)

    def __init__(self, item_type: type | None = None) -> None:
        self.item_type = item_type

    def coerce(self, value: Any) -> list[Any]:
        items = list(super().coerce(value))
        if self.item_type is not None:
            for item in items:
                if not isinstance(item, self.item_type):
                    raise TypeError(
                        f"ListBased expects items of {self.item_type.__name__}, "
                        f"got {type(item).__name__}"
                    )
        return items


def private(func: F) -> F:
    """Mark a constructor as private: only ``instantiate`` should call it."""
    setattr(func, VISIBILITY_ATTRIBUTE, "private")
    return func


def protected(func: F) -> F:
    setattr(func, VISIBILITY_ATTRIBUTE, "protected")
    return func


def marker_of(cls: type) -> TypeBased | None:
    marker = getattr(cls, MARKER_ATTRIBUTE, None)
    return marker if isinstance(marker, TypeBased) else None


def instantiate(cls: type[T], value: Any) -> T:
    """Create an instance of a value class after checking the wrapped value's type."""
    marker = marker_of(cls)
    if marker is None:
        raise TypeError(f"{cls.__qualname__} is not marked with a TypeBased marker")
    return cls(marker.coerce(value))  # type: ignore[call-arg]
