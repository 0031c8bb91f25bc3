"""Value Class Readonly rule (E9702): marked classes must be immutable."""

from typed_values_linter.domain.entities import ClassDeclaration
from typed_values_linter.domain.marker_resolver import MarkerAttributeResolver
from typed_values_linter.domain.rules import ClassRule, Violation


class ValueClassReadonlyRule(ClassRule):
    """
    Rule for E9702: no field of a value class may be reassigned after construction.

    A class counts as readonly when it is a frozen dataclass, a frozen attrs class
    or a NamedTuple.
    """

    code: str = "E9702"
    symbol: str = "value-class-not-readonly"
    description: str = "Value classes must be immutable (frozen dataclass or NamedTuple)."
    message_template: str = (
        "Class %s is marked with @%s and must be declared readonly. "
        "Make it a frozen dataclass (@dataclass(frozen=True)) or a NamedTuple."
    )

    def __init__(self, resolver: MarkerAttributeResolver) -> None:
        self._resolver = resolver

    def check(self, declaration: ClassDeclaration) -> list[Violation]:
        marker = self._resolver.resolve(declaration)
        if marker is None or declaration.is_readonly:
            return []
        args = (declaration.qname, marker.short_name)
        return [
            Violation.from_node(
                code=self.code,
                symbol=self.symbol,
                message=self.message_template % args,
                node=declaration.node,
                message_args=args,
            )
        ]
