"""GuidanceService: loads the rule registry and exposes it as a rule catalog."""

from pathlib import Path
from typing import Any

import yaml

from typed_values_linter.domain.protocols import GuidanceServiceProtocol
from typed_values_linter.domain.rule_catalog import RuleCatalog, RuleDefinition


class GuidanceService(GuidanceServiceProtocol):
    """Loads rule_registry.yaml and provides get_catalog / get_entry."""

    def __init__(self, registry_path: str | None = None) -> None:
        if registry_path is not None:
            self._path = Path(registry_path)
        else:
            # Default: packaged resource next to this package
            _base = Path(__file__).resolve().parent.parent.parent
            self._path = _base / "resources" / "rule_registry.yaml"
        self._registry: dict[str, Any] = {}
        self._load()
        self._catalog = RuleCatalog(self._registry)

    def _load(self) -> None:
        if self._path.exists():
            with open(self._path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
                self._registry = data if isinstance(data, dict) else {}
        else:
            self._registry = {}

    def get_registry(self) -> dict[str, Any]:
        """Return a shallow copy of the loaded registry."""
        return dict(self._registry)

    def get_catalog(self) -> RuleCatalog:
        return self._catalog

    def get_entry(self, rule_code: str) -> RuleDefinition | None:
        """Return the rule for a code or symbol."""
        return self._catalog.find(rule_code)
