"""Value class checks (E9701-E9705). Thin: delegate to the domain rules."""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import astroid

if TYPE_CHECKING:
    from pylint.lint import PyLinter

from pylint.checkers import BaseChecker

from typed_values_linter.domain.config import ConfigurationLoader
from typed_values_linter.domain.construction_resolver import ConstructionSiteClassResolver
from typed_values_linter.domain.protocols import AstroidProtocol
from typed_values_linter.domain.rule_catalog import RuleCatalog
from typed_values_linter.domain.rules import ClassRule, Violation
from typed_values_linter.domain.rules.construction_guard import ValueClassConstructionGuardRule
from typed_values_linter.domain.rules.final import ValueClassFinalRule
from typed_values_linter.domain.rules.private_constructor import ValueClassPrivateConstructorRule
from typed_values_linter.domain.rules.readonly import ValueClassReadonlyRule
from typed_values_linter.domain.rules.single_marker import ValueClassSingleMarkerRule


class ValueClassChecker(BaseChecker):
    """E9701-E9703, E9705: structure of classes carrying a value marker."""

    name: str = "typed-values-class"
    CODES = ["E9701", "E9702", "E9703", "E9705"]

    def __init__(
        self,
        linter: "PyLinter",
        ast_gateway: AstroidProtocol,
        config_loader: ConfigurationLoader,
        registry: Mapping[str, Any],
    ) -> None:
        self.msgs = RuleCatalog(registry).pylint_msgs(self.CODES)  # type: ignore[assignment]
        super().__init__(linter)
        self.config_loader = config_loader
        self._ast_gateway = ast_gateway
        resolver = config_loader.build_marker_resolver()
        self._rules: list[ClassRule] = [
            ValueClassFinalRule(resolver),
            ValueClassReadonlyRule(resolver),
            ValueClassPrivateConstructorRule(resolver),
        ]
        if config_loader.report_multiple_markers:
            self._rules.append(ValueClassSingleMarkerRule(resolver))

    def visit_classdef(self, node: astroid.nodes.ClassDef) -> None:
        """Delegate E9701-E9703 (and E9705 when enabled) to the domain rules."""
        declaration = self._ast_gateway.reflect_class(node)
        for rule in self._rules:
            self._report(rule.check(declaration))

    def _report(self, violations: list[Violation]) -> None:
        for v in violations:
            self.add_message(v.symbol, node=v.node, args=v.message_args)


class ConstructionGuardChecker(BaseChecker):
    """E9704: value classes must not be constructed directly."""

    name: str = "typed-values-construction"
    CODES = ["E9704"]

    def __init__(
        self,
        linter: "PyLinter",
        ast_gateway: AstroidProtocol,
        config_loader: ConfigurationLoader,
        registry: Mapping[str, Any],
    ) -> None:
        self.msgs = RuleCatalog(registry).pylint_msgs(self.CODES)  # type: ignore[assignment]
        super().__init__(linter)
        self.config_loader = config_loader
        self._ast_gateway = ast_gateway
        self._guard_rule = ValueClassConstructionGuardRule(
            config_loader.build_marker_resolver(),
            ConstructionSiteClassResolver(),
            factory_function=config_loader.factory_function,
        )

    def visit_call(self, node: astroid.nodes.Call) -> None:
        """Delegate E9704 to the construction guard rule."""
        site = self._ast_gateway.construction_site(node)
        scope = self._ast_gateway.scope_for(node)
        for v in self._guard_rule.check(site, scope):
            self.add_message(v.symbol, node=v.node, args=v.message_args)
