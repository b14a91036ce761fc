"""Configuration loader with multi-level hierarchy."""

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

ENV_PREFIX = "TALENTMATCH_"

# Plain variable names honoured for compatibility with existing Ollama setups
OLLAMA_ENV_OVERRIDES = {
    "OLLAMA_URL": ("ollama", "url"),
    "OLLAMA_MODEL": ("ollama", "model"),
}


class ConfigLoader:
    """Load and merge configuration from multiple sources.

    Hierarchy (later overrides earlier):
    1. Default config (config/default.yaml)
    2. Environment config (config/environments/{env}.yaml)
    3. Programmatic overrides [optional]
    4. OLLAMA_URL / OLLAMA_MODEL
    5. Environment variables (TALENTMATCH_*)
    """

    def __init__(self, config_dir: Path | str | None = None):
        """Initialize config loader.

        Args:
            config_dir: Configuration directory (defaults to ./config)
        """
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent.parent / "config"
        self.config_dir = Path(config_dir)

    def load(self, overrides: dict[str, Any] | None = None) -> dict[str, Any]:
        """Load configuration with full hierarchy.

        Args:
            overrides: Configuration dict provided programmatically

        Returns:
            Merged configuration dictionary
        """
        config = self._load_yaml(self.config_dir / "default.yaml")

        env = os.getenv(f"{ENV_PREFIX}ENV", "development")
        env_config_path = self.config_dir / f"environments/{env}.yaml"
        if env_config_path.exists():
            config = self._deep_merge(config, self._load_yaml(env_config_path))

        if overrides:
            config = self._deep_merge(config, overrides)

        for var, path in OLLAMA_ENV_OVERRIDES.items():
            value = os.getenv(var)
            if value:
                self._set_nested(config, list(path), value, convert=False)

        return self._apply_env_overrides(config)

    def _load_yaml(self, path: Path) -> dict[str, Any]:
        if not path.exists():
            return {}

        with open(path) as f:
            content = yaml.safe_load(f)
            return content if content else {}

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries.

        Args:
            base: Base dictionary
            override: Override dictionary

        Returns:
            Merged dictionary (base is not modified)
        """
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def _apply_env_overrides(self, config: dict[str, Any]) -> dict[str, Any]:
        """Override config with environment variables.

        The first underscore separates section from key, so keys keep theirs.

        Example: TALENTMATCH_OLLAMA_MODEL overrides config["ollama"]["model"],
        TALENTMATCH_STORAGE_STORE_DIR overrides config["storage"]["store_dir"]
        """
        for key, value in os.environ.items():
            if key.startswith(ENV_PREFIX):
                section, _, name = key[len(ENV_PREFIX):].lower().partition("_")
                path = [section, name] if name else [section]
                self._set_nested(config, path, value)

        return config

    def _set_nested(
        self,
        config: dict[str, Any],
        path: list[str],
        value: str,
        convert: bool = True,
    ) -> None:
        current = config
        for key in path[:-1]:
            if key not in current:
                current[key] = {}
            elif not isinstance(current[key], dict):
                # Can't traverse non-dict
                return
            current = current[key]

        current[path[-1]] = self._convert_value(value) if convert else value

    def _convert_value(self, value: str) -> Any:
        """Convert string value to bool, int, float, or leave as str."""
        if value.lower() in ("true", "yes"):
            return True
        if value.lower() in ("false", "no"):
            return False

        try:
            if "." in value:
                return float(value)
            return int(value)
        except ValueError:
            pass

        return value


# Global config loader instance
_config_loader: ConfigLoader | None = None


def get_config_loader() -> ConfigLoader:
    """Get global configuration loader instance."""
    global _config_loader
    if _config_loader is None:
        _config_loader = ConfigLoader()
    return _config_loader


def load_config(overrides: dict[str, Any] | None = None) -> dict[str, Any]:
    """Load configuration (convenience function).

    Args:
        overrides: Configuration provided programmatically

    Returns:
        Merged configuration dictionary
    """
    return get_config_loader().load(overrides=overrides)
