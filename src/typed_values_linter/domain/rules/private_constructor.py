"""Value Class Private Constructor rule (E9703)."""

from typed_values_linter.domain.entities import ClassDeclaration
from typed_values_linter.domain.marker_resolver import MarkerAttributeResolver
from typed_values_linter.domain.rules import ClassRule, Violation


class ValueClassPrivateConstructorRule(ClassRule):
    """
    Rule for E9703: an explicit constructor of a value class must be private.

    Classes without an explicit constructor are compliant; the implicit one is
    not considered.
    """

    code: str = "E9703"
    symbol: str = "value-class-non-private-constructor"
    description: str = "Explicit constructors of value classes must be decorated with @private."
    message_template: str = (
        "Class %s is marked with @%s and must have a private constructor, "
        "but it has a %s constructor. Decorate the constructor with @private."
    )

    def __init__(self, resolver: MarkerAttributeResolver) -> None:
        self._resolver = resolver

    def check(self, declaration: ClassDeclaration) -> list[Violation]:
        marker = self._resolver.resolve(declaration)
        if marker is None:
            return []
        constructor = declaration.constructor
        if constructor is None or constructor.is_private:
            return []
        args = (declaration.qname, marker.short_name, constructor.visibility.value)
        return [
            Violation.from_node(
                code=self.code,
                symbol=self.symbol,
                message=self.message_template % args,
                node=declaration.node,
                message_args=args,
            )
        ]
