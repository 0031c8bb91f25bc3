from typing import Any, Optional, cast

from typed_values_linter.domain.config import ConfigurationLoader
from typed_values_linter.infrastructure.adapters.pylint_adapter import PylintAdapter
from typed_values_linter.infrastructure.config_file_loader import ConfigFileLoader
from typed_values_linter.infrastructure.gateways.astroid_gateway import AstroidGateway
from typed_values_linter.infrastructure.services.guidance_service import GuidanceService


class TypedValuesContainer:
    """Dependency Injection Container for the typed-values linter."""

    _instance: Optional["TypedValuesContainer"] = None

    def __init__(self) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register default implementations for protocols."""
        config_dict, tool_section = ConfigFileLoader.load_config_from_fs()
        config_loader = ConfigurationLoader(config_dict, tool_section)
        self.register_singleton("ConfigurationLoader", config_loader)

        self.register_singleton(
            "AstroidGateway",
            AstroidGateway(
                private_decorators=config_loader.private_constructor_decorators,
                protected_decorators=config_loader.protected_constructor_decorators,
            ),
        )
        guidance_service = GuidanceService()
        self.register_singleton("GuidanceService", guidance_service)
        self.register_singleton(
            "PylintAdapter",
            PylintAdapter(guidance_service=guidance_service),
        )

    @classmethod
    def get_instance(cls) -> "TypedValuesContainer":
        """Get or create global container instance."""
        if cls._instance is None:
            cls._instance = TypedValuesContainer()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance (primarily for testing)."""
        cls._instance = None

    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_config_loader(self) -> ConfigurationLoader:
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_astroid_gateway(self) -> AstroidGateway:
        return cast(AstroidGateway, self.get("AstroidGateway"))

    def get_guidance_service(self) -> GuidanceService:
        return cast(GuidanceService, self.get("GuidanceService"))

    def get_pylint_adapter(self) -> PylintAdapter:
        return cast(PylintAdapter, self.get("PylintAdapter"))
