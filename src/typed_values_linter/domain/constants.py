"""Shared constants for the typed-values linter."""

TYPED_VALUES_PREFIX = "typed-values."

MARKERS_MODULE = "typed_values_linter.markers"

DEFAULT_MARKER_BASE_CLASSES: tuple[str, ...] = (f"{MARKERS_MODULE}.TypeBased",)

DEFAULT_KNOWN_MARKERS: tuple[str, ...] = (
    f"{MARKERS_MODULE}.StringBased",
    f"{MARKERS_MODULE}.IntegerBased",
    f"{MARKERS_MODULE}.FloatBased",
    f"{MARKERS_MODULE}.ListBased",
)

DEFAULT_FACTORY_FUNCTION = f"{MARKERS_MODULE}.instantiate"

DEFAULT_PRIVATE_CONSTRUCTOR_DECORATORS: tuple[str, ...] = ("private",)
DEFAULT_PROTECTED_CONSTRUCTOR_DECORATORS: tuple[str, ...] = ("protected",)

# Decorator names that make a class final or immutable.
FINAL_DECORATOR_NAMES: frozenset[str] = frozenset({"final"})
DATACLASS_DECORATOR_NAMES: frozenset[str] = frozenset({"dataclass", "define", "attrs", "s"})
FROZEN_DECORATOR_NAMES: frozenset[str] = frozenset({"frozen"})
IMMUTABLE_BASE_NAMES: frozenset[str] = frozenset({"NamedTuple"})

CONSTRUCTOR_NAMES: tuple[str, ...] = ("__init__", "__new__")

PLUGIN_MODULE = "typed_values_linter.checker"
