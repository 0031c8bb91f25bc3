"""The rule catalog: typed views over the raw rule registry mapping."""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from typed_values_linter.domain.constants import TYPED_VALUES_PREFIX

PylintMsg = tuple[str, str, str]


@dataclass(frozen=True)
class RuleDefinition:
    """One registry entry. ``code`` is the bare message id, e.g. ``E9701``."""

    code: str
    symbol: str
    message_template: str = ""
    display_name: str = ""
    short_description: str = ""
    manual_instructions: str = ""
    references: tuple[str, ...] = ()

    @property
    def rule_id(self) -> str:
        return f"{TYPED_VALUES_PREFIX}{self.code}"

    @classmethod
    def from_raw(cls, code: str, raw: Mapping[str, Any]) -> "RuleDefinition":
        return cls(
            code=code,
            symbol=str(raw.get("symbol") or code),
            message_template=str(raw.get("message_template") or ""),
            display_name=str(raw.get("display_name") or ""),
            short_description=str(raw.get("short_description") or ""),
            manual_instructions=str(raw.get("manual_instructions") or "").strip(),
            references=tuple(str(ref) for ref in raw.get("references") or ()),
        )

    def pylint_msg(self) -> PylintMsg:
        """The ``(template, symbol, description)`` triple a checker's ``msgs`` expects."""
        description = self.display_name or self.short_description or self.code
        return (self.message_template, self.symbol, description)


class RuleCatalog:
    """
    Rules read from a registry mapping keyed ``typed-values.<code>``.

    Keys under another prefix and entries that are not mappings are ignored.
    Rules are kept in code order.
    """

    def __init__(self, registry: Mapping[str, Any]) -> None:
        self._rules: dict[str, RuleDefinition] = {}
        for key in sorted(registry):
            raw = registry[key]
            if key.startswith(TYPED_VALUES_PREFIX) and isinstance(raw, Mapping):
                code = key[len(TYPED_VALUES_PREFIX):]
                self._rules[code] = RuleDefinition.from_raw(code, raw)

    def __iter__(self) -> Iterator[RuleDefinition]:
        return iter(self._rules.values())

    def __len__(self) -> int:
        return len(self._rules)

    def find(self, code_or_symbol: str) -> RuleDefinition | None:
        if code_or_symbol in self._rules:
            return self._rules[code_or_symbol]
        for rule in self._rules.values():
            if rule.symbol == code_or_symbol:
                return rule
        return None

    def pylint_msgs(self, codes: Iterable[str]) -> dict[str, PylintMsg]:
        """``msgs`` for the given codes; codes without a message template are left out."""
        msgs: dict[str, PylintMsg] = {}
        for code in codes:
            rule = self._rules.get(code)
            if rule is not None and rule.message_template:
                msgs[code] = rule.pylint_msg()
        return msgs

    def symbols(self) -> list[str]:
        return [rule.symbol for rule in self]
