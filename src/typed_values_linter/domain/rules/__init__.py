"""Domain models for rules and violations."""

from dataclasses import dataclass

__all__ = [
    "ClassRule",
    "ConstructionRule",
    "Violation",
]

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from typed_values_linter.domain.entities import ClassDeclaration, ConstructionSite
    from typed_values_linter.domain.protocols import ScopeProtocol


@dataclass(frozen=True)
class Violation:
    """A rule violation with code, message and location."""

    code: str
    symbol: str
    message: str
    location: str
    node: Any
    message_args: tuple[str, ...] = ()
    """Args for Pylint add_message, matching the registry message template."""

    @staticmethod
    def _location_from_node(node: Any) -> str:
        """Compute path:lineno:col_offset from an astroid node. Used by from_node."""
        if node is None:
            return ""
        root = node.root()
        path = getattr(root, "file", "") or ""
        lineno = getattr(node, "lineno", 0)
        col_offset = getattr(node, "col_offset", 0)
        return f"{path}:{lineno}:{col_offset}"

    @classmethod
    def from_node(
        cls,
        *,
        code: str,
        symbol: str,
        message: str,
        node: Any,
        message_args: tuple[str, ...] = (),
    ) -> "Violation":
        """Build a Violation with location derived from node."""
        return cls(
            code=code,
            symbol=symbol,
            message=message,
            location=cls._location_from_node(node),
            node=node,
            message_args=message_args,
        )


class ClassRule(Protocol):
    """Check run once per class definition."""

    code: str
    symbol: str
    description: str

    def check(self, declaration: "ClassDeclaration") -> list[Violation]:
        ...


class ConstructionRule(Protocol):
    """Check run once per construction expression."""

    code: str
    symbol: str
    description: str

    def check(self, site: "ConstructionSite", scope: "ScopeProtocol") -> list[Violation]:
        ...
