"""Load [tool.typed-values] and [tool] from pyproject.toml. Infrastructure I/O only."""

import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib as toml_lib
else:
    import tomli as toml_lib


class ConfigFileLoader:
    """Loads config from pyproject.toml."""

    SECTION = "typed-values"

    @staticmethod
    def load_config_from_fs(start: Path | None = None) -> tuple[dict[str, object], dict[str, object]]:
        """Load [tool.typed-values] and [tool] from the nearest pyproject.toml.

        Returns (config_dict, tool_section).
        """
        current_path = (start or Path.cwd()).resolve()
        empty: dict[str, object] = {}
        for candidate in (current_path, *current_path.parents):
            config_file = candidate / "pyproject.toml"
            if not config_file.exists():
                continue
            try:
                with config_file.open("rb") as f:
                    data = toml_lib.load(f)
            except (OSError, toml_lib.TOMLDecodeError):
                continue
            tool_section = data.get("tool", {}) or {}
            config_dict = tool_section.get(ConfigFileLoader.SECTION, {}) or {}
            return (config_dict, tool_section)
        return (empty, empty)
