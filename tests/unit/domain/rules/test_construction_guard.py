"""Unit tests for ValueClassConstructionGuardRule (E9704)."""

import unittest

from typed_values_linter.domain.entities import ConstructionSite, InferredType
from typed_values_linter.domain.rules.construction_guard import ValueClassConstructionGuardRule
from tests.unit.value_class_fixtures import (
    FakeScope,
    compliant_declaration,
    declaration,
    fixture_resolver,
    marker_entry,
)

EMAIL = "shop.values.EmailAddress"
PLAIN = "shop.values.Plain"
SKU = "shop.values.Sku"


class TestValueClassConstructionGuardRule(unittest.TestCase):

    def setUp(self) -> None:
        self.rule = ValueClassConstructionGuardRule(fixture_resolver())
        self.scope = FakeScope(
            classes={
                EMAIL: compliant_declaration(EMAIL),
                PLAIN: declaration(PLAIN),
                SKU: declaration(SKU, attributes=(marker_entry(),)),
            },
            names={"EmailAddress": EMAIL, "Plain": PLAIN, "Missing": "shop.values.Missing"},
            inferred={
                "email_name": InferredType(constant_strings=(EMAIL,)),
                "unknown": InferredType(),
                "either": InferredType(class_names=(EMAIL, PLAIN)),
                "both_marked": InferredType(class_names=(EMAIL, SKU)),
                "plain_first": InferredType(class_names=(PLAIN, SKU)),
            },
        )

    def _site(self, designator: str, is_name_reference: bool = False) -> ConstructionSite:
        return ConstructionSite(node=None, designator=designator, is_name_reference=is_name_reference)

    def test_direct_construction_of_marked_class_is_reported(self) -> None:
        [violation] = self.rule.check(self._site("EmailAddress", True), self.scope)
        self.assertEqual(violation.code, "E9704")
        self.assertEqual(violation.symbol, "value-class-direct-construction")
        self.assertEqual(
            violation.message,
            "Instantiation of class shop.values.EmailAddress is forbidden because it is "
            "marked with @StringBased. Use `instantiate(EmailAddress, value)` instead.",
        )

    def test_unmarked_class_is_allowed(self) -> None:
        self.assertEqual(self.rule.check(self._site("Plain", True), self.scope), [])

    def test_unknown_class_name_is_skipped(self) -> None:
        self.assertEqual(self.rule.check(self._site("Missing", True), self.scope), [])

    def test_constant_string_naming_marked_class_is_reported(self) -> None:
        self.assertEqual(len(self.rule.check(self._site("email_name"), self.scope)), 1)

    def test_unknown_inferred_type_is_allowed(self) -> None:
        self.assertEqual(self.rule.check(self._site("unknown"), self.scope), [])

    def test_union_with_one_marked_member_reports_once(self) -> None:
        self.assertEqual(len(self.rule.check(self._site("either"), self.scope)), 1)

    def test_union_with_two_marked_members_reports_once_for_the_first(self) -> None:
        [violation] = self.rule.check(self._site("both_marked"), self.scope)
        self.assertEqual(violation.message_args[0], EMAIL)

    def test_unmarked_candidates_are_skipped_until_a_marked_one(self) -> None:
        [violation] = self.rule.check(self._site("plain_first"), self.scope)
        self.assertEqual(violation.message_args[:2], (SKU, "StringBased"))

    def test_custom_factory_function_is_named_in_message(self) -> None:
        rule = ValueClassConstructionGuardRule(
            fixture_resolver(), factory_function="shop.factories.build"
        )
        [violation] = rule.check(self._site("EmailAddress", True), self.scope)
        self.assertIn("`build(EmailAddress, value)`", violation.message)

    def test_repeated_checks_are_identical(self) -> None:
        site = self._site("either")
        self.assertEqual(self.rule.check(site, self.scope), self.rule.check(site, self.scope))
