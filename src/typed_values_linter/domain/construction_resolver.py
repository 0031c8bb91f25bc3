"""Construction-Site Class Resolver: which classes may a call expression construct."""

from typed_values_linter.domain.entities import CandidateClassSet, ConstructionSite
from typed_values_linter.domain.protocols import ScopeProtocol


class ConstructionSiteClassResolver:
    """
    Produces every class a construction site may build.

    A written name that lexical lookup binds to a known class resolves to a single
    candidate. Anything else, including a name bound to an alias the class table
    does not know, goes through inference, and every class of a union is returned
    so that callers can be conservative.
    """

    def resolve(self, site: ConstructionSite, scope: ScopeProtocol) -> CandidateClassSet:
        if site.is_name_reference:
            qname = scope.resolve_name(site.designator)
            if qname and scope.has_class(qname):
                return CandidateClassSet((qname,))
        return self._resolve_dynamic(site, scope)

    def _resolve_dynamic(
        self, site: ConstructionSite, scope: ScopeProtocol
    ) -> CandidateClassSet:
        inferred = scope.infer_type(site.designator)
        if inferred.is_unknown:
            return CandidateClassSet(())
        names: list[str] = []
        for value in inferred.constant_strings:
            if scope.has_class(value):
                names.append(value)
        names.extend(inferred.class_names)
        return CandidateClassSet(tuple(names))
