from typing import TYPE_CHECKING, Any, Protocol

from typed_values_linter.domain.rule_catalog import RuleCatalog, RuleDefinition

if TYPE_CHECKING:
    from typed_values_linter.domain.entities import (
        ClassDeclaration,
        ConstructionSite,
        InferredType,
        LinterResult,
    )


class ScopeProtocol(Protocol):
    """Read-only query surface for name resolution and inference at one program point."""

    def resolve_name(self, designator: Any) -> str | None:
        """Resolve a written class name through the lexical scope to a qualified name."""
        ...

    def infer_type(self, designator: Any) -> "InferredType":
        """Infer the classes and constant strings an expression may evaluate to."""
        ...

    def has_class(self, qname: str) -> bool:
        ...

    def get_class(self, qname: str) -> "ClassDeclaration | None":
        ...


class AstroidProtocol(Protocol):
    def reflect_class(self, node: Any) -> "ClassDeclaration":
        ...

    def construction_site(self, node: Any) -> "ConstructionSite":
        ...

    def scope_for(self, node: Any) -> ScopeProtocol:
        ...


class GuidanceServiceProtocol(Protocol):
    def get_registry(self) -> dict[str, Any]:
        ...

    def get_catalog(self) -> RuleCatalog:
        ...

    def get_entry(self, rule_code: str) -> RuleDefinition | None:
        ...


class LinterAdapterProtocol(Protocol):
    def gather_results(self, target_path: str) -> list["LinterResult"]:
        ...
