"""Value Class Final rule (E9701): marked classes must be declared final."""

from typed_values_linter.domain.entities import ClassDeclaration
from typed_values_linter.domain.marker_resolver import MarkerAttributeResolver
from typed_values_linter.domain.rules import ClassRule, Violation


class ValueClassFinalRule(ClassRule):
    """Rule for E9701: a value class must not be subclassable."""

    code: str = "E9701"
    symbol: str = "value-class-not-final"
    description: str = "Value classes must be decorated with @final."
    message_template: str = (
        "Class %s is marked with @%s and must be declared final. "
        "Add the @final decorator to the class definition."
    )

    def __init__(self, resolver: MarkerAttributeResolver) -> None:
        self._resolver = resolver

    def check(self, declaration: ClassDeclaration) -> list[Violation]:
        marker = self._resolver.resolve(declaration)
        if marker is None or declaration.is_final:
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
