"""astroid-backed reflection and scope for the value class rules."""

import logging
from collections.abc import Iterable
from functools import partial

import astroid
from astroid import nodes

from typed_values_linter.domain.constants import (
    CONSTRUCTOR_NAMES,
    DATACLASS_DECORATOR_NAMES,
    DEFAULT_PRIVATE_CONSTRUCTOR_DECORATORS,
    DEFAULT_PROTECTED_CONSTRUCTOR_DECORATORS,
    FINAL_DECORATOR_NAMES,
    FROZEN_DECORATOR_NAMES,
    IMMUTABLE_BASE_NAMES,
)
from typed_values_linter.domain.entities import (
    AttributeEntry,
    AttributeInstance,
    ClassDeclaration,
    ConstructionSite,
    ConstructorDeclaration,
    InferredType,
    Visibility,
)
from typed_values_linter.domain.protocols import AstroidProtocol, ScopeProtocol

logger = logging.getLogger(__name__)

# Re-export chains (package __init__ importing from submodules) are followed this deep.
_MAX_REEXPORT_DEPTH = 5


class AttributeUnresolvableError(Exception):
    """A decorator expression could not be evaluated to a value."""


class AstroidGateway(AstroidProtocol):
    """Builds domain declarations from astroid nodes. Lookup is lexical; evaluation is inference."""

    def __init__(
        self,
        private_decorators: Iterable[str] = DEFAULT_PRIVATE_CONSTRUCTOR_DECORATORS,
        protected_decorators: Iterable[str] = DEFAULT_PROTECTED_CONSTRUCTOR_DECORATORS,
    ) -> None:
        self._private_decorators = frozenset(private_decorators)
        self._protected_decorators = frozenset(protected_decorators)

    # ------------------------------------------------------------------ #
    # Class reflection
    # ------------------------------------------------------------------ #

    def reflect_class(self, node: nodes.ClassDef) -> ClassDeclaration:
        decorators = self._decorator_nodes(node)
        return ClassDeclaration(
            qname=node.qname(),
            is_final=self._is_final(decorators),
            is_readonly=self._is_readonly(node, decorators),
            attributes=tuple(self._attribute_entry(dec) for dec in decorators),
            constructor=self._constructor(node),
            method_names=frozenset(
                member.name for member in node.body if isinstance(member, nodes.FunctionDef)
            ),
            node=node,
        )

    def construction_site(self, node: nodes.Call) -> ConstructionSite:
        return ConstructionSite(
            node=node,
            designator=node.func,
            is_name_reference=self._is_dotted_name(node.func),
        )

    def scope_for(self, node: nodes.NodeNG) -> "AstroidScope":
        return AstroidScope(node, self)

    @staticmethod
    def _decorator_nodes(node: nodes.ClassDef | nodes.FunctionDef) -> list[nodes.NodeNG]:
        if not node.decorators:
            return []
        return list(node.decorators.nodes)

    @staticmethod
    def _callee(decorator: nodes.NodeNG) -> nodes.NodeNG:
        if isinstance(decorator, nodes.Call):
            return decorator.func
        return decorator

    @staticmethod
    def _terminal_name(node: nodes.NodeNG) -> str | None:
        if isinstance(node, nodes.Name):
            return node.name
        if isinstance(node, nodes.Attribute):
            return node.attrname
        return None

    def _is_final(self, decorators: list[nodes.NodeNG]) -> bool:
        return any(
            self._terminal_name(self._callee(dec)) in FINAL_DECORATOR_NAMES
            for dec in decorators
        )

    def _is_readonly(self, node: nodes.ClassDef, decorators: list[nodes.NodeNG]) -> bool:
        for dec in decorators:
            name = self._terminal_name(self._callee(dec))
            if name in FROZEN_DECORATOR_NAMES:
                return True
            if isinstance(dec, nodes.Call) and name in DATACLASS_DECORATOR_NAMES:
                for kw in dec.keywords or []:
                    if (
                        kw.arg == "frozen"
                        and isinstance(kw.value, nodes.Const)
                        and kw.value.value is True
                    ):
                        return True
        return any(self._terminal_name(base) in IMMUTABLE_BASE_NAMES for base in node.bases)

    def _constructor(self, node: nodes.ClassDef) -> ConstructorDeclaration | None:
        for name in CONSTRUCTOR_NAMES:
            for member in node.locals.get(name, []):
                # brains (dataclass, attrs) add generated constructors to locals only
                if isinstance(member, nodes.FunctionDef) and member in node.body:
                    return ConstructorDeclaration(name=name, visibility=self._visibility(member))
        return None

    def _visibility(self, method: nodes.FunctionDef) -> Visibility:
        names = {self._terminal_name(self._callee(dec)) for dec in self._decorator_nodes(method)}
        if names & self._private_decorators:
            return Visibility.PRIVATE
        if names & self._protected_decorators:
            return Visibility.PROTECTED
        return Visibility.PUBLIC

    # ------------------------------------------------------------------ #
    # Attribute entries
    # ------------------------------------------------------------------ #

    def _attribute_entry(self, decorator: nodes.NodeNG) -> AttributeEntry:
        callee = self._callee(decorator)
        return AttributeEntry(
            qname=self.static_qname(callee) or callee.as_string(),
            declared_supertypes=self._declared_supertypes(callee),
            instantiate=partial(self._instantiate_attribute, decorator),
        )

    @staticmethod
    def _instantiate_attribute(decorator: nodes.NodeNG) -> AttributeInstance:
        """Evaluate a decorator expression. Raises when inference gives up."""
        inferred = next(decorator.infer())
        if inferred is astroid.Uninferable:
            raise AttributeUnresolvableError(decorator.as_string())
        if isinstance(inferred, nodes.ClassDef):
            klass = inferred
        elif isinstance(inferred, astroid.Instance):
            klass = inferred._proxied
        else:
            return AttributeInstance(type_qnames=())
        ancestors = list(klass.ancestors())
        for current in (klass, *ancestors):
            AstroidGateway._ensure_bases_loadable(current)
        return AttributeInstance(
            type_qnames=(klass.qname(), *(ancestor.qname() for ancestor in ancestors))
        )

    @staticmethod
    def _ensure_bases_loadable(klass: nodes.ClassDef) -> None:
        """A class whose base cannot be loaded cannot be instantiated either."""
        for base in klass.bases:
            try:
                values = base.inferred()
            except astroid.InferenceError as exc:
                raise AttributeUnresolvableError(base.as_string()) from exc
            if not values or any(value is astroid.Uninferable for value in values):
                raise AttributeUnresolvableError(base.as_string())

    def _declared_supertypes(self, callee: nodes.NodeNG) -> tuple[str, ...]:
        """
        Base class names the symbol table knows for ``callee``, without inference.

        The callee and every base are followed across modules through their
        imports, so a marker defined elsewhere keeps its declared ancestry even
        when one of its bases cannot be loaded.
        """
        found: list[str] = []
        seen: set[int] = set()
        pending = [self._declared_classdef(callee)]
        while pending:
            classdef = pending.pop()
            if classdef is None or id(classdef) in seen:
                continue
            seen.add(id(classdef))
            for base in classdef.bases:
                qname = self.static_qname(base)
                if qname:
                    found.append(qname)
                pending.append(self._declared_classdef(base, qname))
        return tuple(found)

    def _declared_classdef(
        self, node: nodes.NodeNG, qname: str | None = None
    ) -> nodes.ClassDef | None:
        if isinstance(node, nodes.Name):
            _, stmts = node.lookup(node.name)
            if stmts and isinstance(stmts[-1], nodes.ClassDef):
                return stmts[-1]
        qname = qname or self.static_qname(node)
        if not qname:
            return None
        return self.find_classdef(qname, node)

    # ------------------------------------------------------------------ #
    # Lexical names
    # ------------------------------------------------------------------ #

    @staticmethod
    def _is_dotted_name(node: nodes.NodeNG) -> bool:
        while isinstance(node, nodes.Attribute):
            node = node.expr
        return isinstance(node, nodes.Name)

    @classmethod
    def static_qname(cls, node: nodes.NodeNG) -> str | None:
        """Qualified name a written name binds to, when bound to a class or an import."""
        if isinstance(node, nodes.Name):
            return cls._binding_qname(node, node.name)
        if isinstance(node, nodes.Attribute):
            base = cls.static_qname(node.expr)
            return f"{base}.{node.attrname}" if base else None
        return None

    @staticmethod
    def _binding_qname(node: nodes.NodeNG, name: str) -> str | None:
        _, stmts = node.lookup(name)
        if not stmts:
            return None
        stmt = stmts[-1]
        if isinstance(stmt, nodes.ClassDef):
            return stmt.qname()
        try:
            if isinstance(stmt, nodes.ImportFrom):
                modname = stmt.modname
                if stmt.level:
                    modname = stmt.root().relative_to_absolute_name(stmt.modname, stmt.level)
                return f"{modname}.{stmt.real_name(name)}"
            if isinstance(stmt, nodes.Import):
                return stmt.real_name(name)
        except (astroid.AttributeInferenceError, astroid.TooManyLevelsError):
            return None
        return None

    # ------------------------------------------------------------------ #
    # Class lookup by qualified name
    # ------------------------------------------------------------------ #

    def find_classdef(
        self, qname: str, anchor: nodes.NodeNG, depth: int = 0
    ) -> nodes.ClassDef | None:
        if depth > _MAX_REEXPORT_DEPTH:
            return None
        root = anchor.root()
        if "." not in qname:
            return self._walk(root, [qname], depth)
        prefix = f"{root.name}."
        if qname.startswith(prefix):
            found = self._walk(root, qname[len(prefix):].split("."), depth)
            if found is not None:
                return found
        parts = qname.split(".")
        for index in range(len(parts) - 1, 0, -1):
            modname = ".".join(parts[:index])
            try:
                module = astroid.MANAGER.ast_from_module_name(modname)
            except astroid.AstroidBuildingError:
                continue
            return self._walk(module, parts[index:], depth)
        return None

    def _walk(
        self, scope: nodes.NodeNG, parts: list[str], depth: int
    ) -> nodes.ClassDef | None:
        current = scope
        for position, part in enumerate(parts):
            members = current.locals.get(part, [])
            classes = [m for m in members if isinstance(m, nodes.ClassDef)]
            if classes:
                current = classes[-1]
                continue
            for member in members:
                if isinstance(member, nodes.ImportFrom):
                    target = self._binding_qname(member, part)
                    if target:
                        rest = ".".join([target, *parts[position + 1:]])
                        return self.find_classdef(rest, member, depth + 1)
            return None
        return current if isinstance(current, nodes.ClassDef) else None


class AstroidScope(ScopeProtocol):
    """The read-only query surface at one node: lexical lookup, inference and class lookup."""

    def __init__(self, node: nodes.NodeNG, gateway: AstroidGateway) -> None:
        self._node = node
        self._gateway = gateway

    def resolve_name(self, designator: nodes.NodeNG) -> str | None:
        return self._gateway.static_qname(designator)

    def infer_type(self, designator: nodes.NodeNG) -> InferredType:
        strings: list[str] = []
        classes: list[str] = []
        try:
            for inferred in designator.infer():
                if isinstance(inferred, nodes.ClassDef):
                    classes.append(inferred.qname())
                elif isinstance(inferred, nodes.Const) and isinstance(inferred.value, str):
                    strings.append(inferred.value)
        except astroid.InferenceError as exc:
            logger.debug("Inference failed for %s: %s", designator.as_string(), exc)
        return InferredType(constant_strings=tuple(strings), class_names=tuple(classes))

    def has_class(self, qname: str) -> bool:
        return self._gateway.find_classdef(qname, self._node) is not None

    def get_class(self, qname: str) -> ClassDeclaration | None:
        classdef = self._gateway.find_classdef(qname, self._node)
        if classdef is None:
            return None
        return self._gateway.reflect_class(classdef)
