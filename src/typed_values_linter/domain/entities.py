"""Domain entities: the read-only program model the rules reason about."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Visibility(Enum):
    """Constructor visibility."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"


@dataclass(frozen=True)
class ConstructorDeclaration:
    """An explicitly declared constructor (``__init__`` or ``__new__``)."""

    name: str
    visibility: Visibility = Visibility.PUBLIC

    @property
    def is_private(self) -> bool:
        return self.visibility is Visibility.PRIVATE


@dataclass(frozen=True)
class AttributeInstance:
    """The evaluated value of a decorator entry, described by its type and ancestors."""

    type_qnames: tuple[str, ...]


@dataclass(frozen=True)
class AttributeEntry:
    """
    One decorator attached to a class, in source order.

    ``instantiate`` evaluates the decorator expression and may raise anything:
    attribute classes can live in modules that are not importable during analysis.
    ``declared_supertypes`` is what the symbol table knows about the decorator's
    class without evaluating it.
    """

    qname: str
    declared_supertypes: tuple[str, ...] = ()
    instantiate: Callable[[], AttributeInstance] = field(
        default=lambda: AttributeInstance(type_qnames=()), compare=False, repr=False
    )


@dataclass(frozen=True)
class ClassDeclaration:
    """Reflection of one class definition. Identity is the qualified name."""

    qname: str
    is_final: bool = False
    is_readonly: bool = False
    attributes: tuple[AttributeEntry, ...] = ()
    constructor: ConstructorDeclaration | None = None
    method_names: frozenset[str] = frozenset()
    node: Any = field(default=None, compare=False, repr=False)

    @property
    def short_name(self) -> str:
        return self.qname.rsplit(".", 1)[-1]


@dataclass(frozen=True)
class MarkerAttribute:
    """The marker decorator that makes a class a value class."""

    qname: str

    @property
    def short_name(self) -> str:
        return self.qname.rsplit(".", 1)[-1]


class ProbeOutcome(Enum):
    MATCHED = "matched"
    NOT_MATCHED = "not_matched"
    UNRESOLVABLE = "unresolvable"


@dataclass(frozen=True)
class MarkerProbe:
    """Tagged result of testing one attribute entry for the marker capability."""

    outcome: ProbeOutcome
    entry: AttributeEntry

    @classmethod
    def matched(cls, entry: AttributeEntry) -> "MarkerProbe":
        return cls(ProbeOutcome.MATCHED, entry)

    @classmethod
    def not_matched(cls, entry: AttributeEntry) -> "MarkerProbe":
        return cls(ProbeOutcome.NOT_MATCHED, entry)

    @classmethod
    def unresolvable(cls, entry: AttributeEntry) -> "MarkerProbe":
        return cls(ProbeOutcome.UNRESOLVABLE, entry)

    @property
    def is_match(self) -> bool:
        return self.outcome is ProbeOutcome.MATCHED


@dataclass(frozen=True)
class InferredType:
    """What inference knows about a class designator: constant strings and classes."""

    constant_strings: tuple[str, ...] = ()
    class_names: tuple[str, ...] = ()

    @property
    def is_unknown(self) -> bool:
        return not self.constant_strings and not self.class_names


@dataclass(frozen=True)
class ConstructionSite:
    """
    A call expression that may construct an object.

    ``designator`` is the callee sub-expression. ``is_name_reference`` is true when
    the designator is written as a plain or dotted name.
    """

    node: Any
    designator: Any
    is_name_reference: bool = False


@dataclass(frozen=True)
class CandidateClassSet:
    """Ordered qualified names a construction site may build. Duplicates are kept."""

    names: tuple[str, ...] = ()

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __len__(self) -> int:
        return len(self.names)

    def __bool__(self) -> bool:
        return bool(self.names)


@dataclass(frozen=True)
class LinterResult:
    """One finding reported by a pylint run, with symbol and location."""

    code: str
    symbol: str
    message: str
    location: str

    def to_line(self) -> str:
        return f"{self.location}: {self.code}: {self.message} ({self.symbol})"
