"""Configuration loader for linter settings. Immutable value object created by Infrastructure."""

import logging

from typed_values_linter.domain.constants import (
    DEFAULT_FACTORY_FUNCTION,
    DEFAULT_KNOWN_MARKERS,
    DEFAULT_MARKER_BASE_CLASSES,
    DEFAULT_PRIVATE_CONSTRUCTOR_DECORATORS,
    DEFAULT_PROTECTED_CONSTRUCTOR_DECORATORS,
)
from typed_values_linter.domain.marker_resolver import MarkerAttributeResolver


class ConfigurationLoader:
    """
    Immutable configuration for linter settings.

    Created by Infrastructure from (config_dict, tool_section). Domain does not
    read the filesystem; Infrastructure calls ConfigFileLoader.load_config_from_fs()
    and constructs ConfigurationLoader(config_dict, tool_section) at composition root.
    """

    _LIST_KEYS = (
        "marker_base_classes",
        "known_markers",
        "private_constructor_decorators",
        "protected_constructor_decorators",
    )

    def __init__(
        self,
        config_dict: dict[str, object],
        tool_section: dict[str, object] | None = None,
    ) -> None:
        """Set config once at construction. No mutable class or instance state after init."""
        self._config = config_dict
        self._tool_section = tool_section or {}
        if config_dict:
            self.validate_config(config_dict)

    def validate_config(self, config: dict[str, object]) -> None:
        """Warn about values of the wrong type; defaults are used for them."""
        for key in self._LIST_KEYS:
            value = config.get(key)
            if value is not None and not self._is_str_list(value):
                logging.warning(
                    "Configuration Warning: '%s' must be a list of strings; using defaults.", key
                )
        factory = config.get("factory_function")
        if factory is not None and not isinstance(factory, str):
            logging.warning(
                "Configuration Warning: 'factory_function' must be a string; using default."
            )
        report = config.get("report_multiple_markers")
        if report is not None and not isinstance(report, bool):
            logging.warning(
                "Configuration Warning: 'report_multiple_markers' must be true or false."
            )

    @staticmethod
    def _is_str_list(value: object) -> bool:
        return isinstance(value, list) and all(isinstance(x, str) for x in value)

    def _str_list(self, key: str, defaults: tuple[str, ...]) -> tuple[str, ...]:
        raw = self._config.get(key)
        if self._is_str_list(raw):
            return tuple(raw)  # type: ignore[arg-type]
        return defaults

    @property
    def config(self) -> dict[str, object]:
        """Return the loaded configuration."""
        return self._config

    @property
    def tool_section(self) -> dict[str, object]:
        return self._tool_section

    @property
    def marker_base_classes(self) -> tuple[str, ...]:
        """Qualified names of the common marker types."""
        return self._str_list("marker_base_classes", DEFAULT_MARKER_BASE_CLASSES)

    @property
    def known_markers(self) -> tuple[str, ...]:
        """Marker classes recognised by name when they cannot be evaluated."""
        return self._str_list("known_markers", DEFAULT_KNOWN_MARKERS)

    @property
    def factory_function(self) -> str:
        raw = self._config.get("factory_function")
        return raw if isinstance(raw, str) and raw else DEFAULT_FACTORY_FUNCTION

    @property
    def private_constructor_decorators(self) -> tuple[str, ...]:
        return self._str_list(
            "private_constructor_decorators", DEFAULT_PRIVATE_CONSTRUCTOR_DECORATORS
        )

    @property
    def protected_constructor_decorators(self) -> tuple[str, ...]:
        return self._str_list(
            "protected_constructor_decorators", DEFAULT_PROTECTED_CONSTRUCTOR_DECORATORS
        )

    @property
    def report_multiple_markers(self) -> bool:
        return self._config.get("report_multiple_markers") is True

    def build_marker_resolver(self) -> MarkerAttributeResolver:
        return MarkerAttributeResolver(
            marker_bases=self.marker_base_classes,
            known_markers=self.known_markers,
        )
