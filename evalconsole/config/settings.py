"""Root settings model for evalconsole configuration.

Values come from ``config/default.toml``, then ``config/{EVALCONSOLE_ENV}.toml``,
then ``EVALCONSOLE_*`` environment variables. The directory holding the TOML
files is ``EVALCONSOLE_CONFIG_DIR`` or the nearest ``config/`` above the
working directory.
"""

import os
import tomllib
from pathlib import Path
from typing import Any, Literal

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from evalconsole.config.models.audit import AuditStorageConfig
from evalconsole.config.models.observability import ObservabilityConfig

ENV_PREFIX = "EVALCONSOLE_"
CONFIG_DIR_VAR = f"{ENV_PREFIX}CONFIG_DIR"
ENVIRONMENT_VAR = f"{ENV_PREFIX}ENV"
DEFAULT_ENVIRONMENT = "development"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# TOML values handed to the settings source by get_settings()
_toml_config: dict[str, Any] = {}


def set_toml_config(config: dict[str, Any]) -> None:
    """Set the TOML configuration to be used by Settings."""
    global _toml_config
    _toml_config = config


def find_config_dir() -> Path:
    """Locate the directory holding default.toml.

    Raises:
        FileNotFoundError: If EVALCONSOLE_CONFIG_DIR names a missing directory
    """
    override = os.environ.get(CONFIG_DIR_VAR)
    if override:
        path = Path(override)
        if not path.is_dir():
            raise FileNotFoundError(f"Config directory not found: {override}")
        return path

    cwd = Path.cwd()
    for directory in (cwd, *cwd.parents):
        if (directory / "config").is_dir():
            return directory / "config"
    return cwd / "config"


def current_environment() -> str:
    return os.environ.get(ENVIRONMENT_VAR, DEFAULT_ENVIRONMENT)


def _merge_sections(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_sections(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_toml_config(config_dir: Path | None = None) -> dict[str, Any]:
    """Read default.toml and merge the current environment's file over it.

    Raises:
        FileNotFoundError: If default.toml is missing
        tomllib.TOMLDecodeError: If a file is not valid TOML
    """
    config_dir = config_dir or find_config_dir()
    default_path = config_dir / "default.toml"
    if not default_path.is_file():
        raise FileNotFoundError(
            f"Default configuration file not found: {default_path}. "
            f"Create config/default.toml or set {CONFIG_DIR_VAR}."
        )

    config: dict[str, Any] = {}
    for path in (default_path, config_dir / f"{current_environment()}.toml"):
        if path.is_file():
            with path.open("rb") as f:
                config = _merge_sections(config, tomllib.load(f))
    return config


class TomlConfigSettingsSource(PydanticBaseSettingsSource):
    """Settings source reading the values set by set_toml_config()."""

    def get_field_value(
        self, field: Any, field_name: str  # noqa: ARG002
    ) -> tuple[Any, str, bool]:
        value = _toml_config.get(field_name)
        return value, field_name, value is not None

    def __call__(self) -> dict[str, Any]:
        return _toml_config.copy()


class Settings(BaseSettings):
    """Root configuration object.

    Configuration is loaded in this order:
    1. Pydantic model defaults (in code)
    2. config/default.toml (base configuration)
    3. config/{EVALCONSOLE_ENV}.toml (environment overrides)
    4. EVALCONSOLE_* environment variables (runtime overrides)
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="evalconsole", description="Application name for logging")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: LogLevel = Field(default="INFO", description="Logging level")

    audit: AuditStorageConfig = Field(
        default_factory=AuditStorageConfig,
        description="Evaluation history storage",
    )
    observability: ObservabilityConfig = Field(
        default_factory=ObservabilityConfig,
        description="Observability configuration",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Priority order (highest to lowest): init args, env vars, TOML, defaults."""
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls),
        )
