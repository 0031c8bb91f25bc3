"""Value Class Single Marker rule (E9705, opt-in)."""

from typed_values_linter.domain.entities import ClassDeclaration
from typed_values_linter.domain.marker_resolver import MarkerAttributeResolver
from typed_values_linter.domain.rules import ClassRule, Violation


class ValueClassSingleMarkerRule(ClassRule):
    """Rule for E9705: a class carries more than one value marker; only the first applies."""

    code: str = "E9705"
    symbol: str = "value-class-multiple-markers"
    description: str = "A value class should carry exactly one marker."
    message_template: str = (
        "Class %s is marked with more than one value marker (%s). Only @%s is applied."
    )

    def __init__(self, resolver: MarkerAttributeResolver) -> None:
        self._resolver = resolver

    def check(self, declaration: ClassDeclaration) -> list[Violation]:
        markers = self._resolver.resolve_all(declaration)
        if len(markers) < 2:
            return []
        listed = ", ".join(f"@{m.short_name}" for m in markers)
        args = (declaration.qname, listed, markers[0].short_name)
        return [
            Violation.from_node(
                code=self.code,
                symbol=self.symbol,
                message=self.message_template % args,
                node=declaration.node,
                message_args=args,
            )
        ]
