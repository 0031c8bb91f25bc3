"""Marker Attribute Resolver: decides whether a class declaration is a value class."""

import logging
from collections.abc import Iterable

from typed_values_linter.domain.entities import (
    AttributeEntry,
    ClassDeclaration,
    MarkerAttribute,
    MarkerProbe,
    ProbeOutcome,
)

logger = logging.getLogger(__name__)


class MarkerAttributeResolver:
    """
    Finds the marker decorator on a class.

    Every entry is first evaluated (``_try_instantiate_and_check``). Only when that
    evaluation fails is the entry tested statically against the declared class
    hierarchy (``_static_subtype_check``). A failing evaluation never masks a marker
    the symbol table can still prove.

    When a class carries several markers the first one in source order wins.
    """

    def __init__(
        self,
        marker_bases: Iterable[str],
        known_markers: Iterable[str] = (),
    ) -> None:
        self._marker_names = frozenset(marker_bases) | frozenset(known_markers)

    def resolve(self, declaration: ClassDeclaration) -> MarkerAttribute | None:
        """Return the first marker attached to ``declaration``, or None."""
        for entry in declaration.attributes:
            if self.probe(entry).is_match:
                return MarkerAttribute(entry.qname)
        return None

    def resolve_all(self, declaration: ClassDeclaration) -> list[MarkerAttribute]:
        """Return every marker attached to ``declaration``, in source order."""
        return [
            MarkerAttribute(entry.qname)
            for entry in declaration.attributes
            if self.probe(entry).is_match
        ]

    def probe(self, entry: AttributeEntry) -> MarkerProbe:
        result = self._try_instantiate_and_check(entry)
        if result.outcome is ProbeOutcome.UNRESOLVABLE:
            return self._static_subtype_check(entry)
        return result

    def _try_instantiate_and_check(self, entry: AttributeEntry) -> MarkerProbe:
        try:
            instance = entry.instantiate()
        except Exception as exc:  # unloadable attribute classes take the static path
            logger.debug("Could not instantiate attribute %s: %s", entry.qname, exc)
            return MarkerProbe.unresolvable(entry)
        if any(qname in self._marker_names for qname in instance.type_qnames):
            return MarkerProbe.matched(entry)
        return MarkerProbe.not_matched(entry)

    def _static_subtype_check(self, entry: AttributeEntry) -> MarkerProbe:
        if entry.qname in self._marker_names:
            return MarkerProbe.matched(entry)
        if any(qname in self._marker_names for qname in entry.declared_supertypes):
            return MarkerProbe.matched(entry)
        return MarkerProbe.not_matched(entry)
