"""Value Class Construction Guard (E9704): no direct construction of value classes."""

from typed_values_linter.domain.construction_resolver import ConstructionSiteClassResolver
from typed_values_linter.domain.constants import DEFAULT_FACTORY_FUNCTION
from typed_values_linter.domain.entities import ConstructionSite
from typed_values_linter.domain.marker_resolver import MarkerAttributeResolver
from typed_values_linter.domain.protocols import ScopeProtocol
from typed_values_linter.domain.rules import ConstructionRule, Violation


class ValueClassConstructionGuardRule(ConstructionRule):
    """
    Rule for E9704: value classes are built through the factory, never called directly.

    At most one violation is reported per call, even when several candidate
    classes of a union are marked.
    """

    code: str = "E9704"
    symbol: str = "value-class-direct-construction"
    description: str = "Value classes must be created through the factory function."
    message_template: str = (
        "Instantiation of class %s is forbidden because it is marked with @%s. "
        "Use `%s(%s, value)` instead."
    )

    def __init__(
        self,
        resolver: MarkerAttributeResolver,
        construction_resolver: ConstructionSiteClassResolver | None = None,
        factory_function: str = DEFAULT_FACTORY_FUNCTION,
    ) -> None:
        self._resolver = resolver
        self._construction_resolver = construction_resolver or ConstructionSiteClassResolver()
        self._factory_function = factory_function

    def check(self, site: ConstructionSite, scope: ScopeProtocol) -> list[Violation]:
        for qname in self._construction_resolver.resolve(site, scope):
            declaration = scope.get_class(qname)
            if declaration is None:
                continue
            marker = self._resolver.resolve(declaration)
            if marker is None:
                continue
            args = (
                declaration.qname,
                marker.short_name,
                self._factory_short_name,
                declaration.short_name,
            )
            return [
                Violation.from_node(
                    code=self.code,
                    symbol=self.symbol,
                    message=self.message_template % args,
                    node=site.node,
                    message_args=args,
                )
            ]
        return []

    @property
    def _factory_short_name(self) -> str:
        return self._factory_function.rsplit(".", 1)[-1]
