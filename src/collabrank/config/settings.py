"""collabrank configuration settings."""

from __future__ import annotations

import json
import os
import tomllib
from pathlib import Path
from typing import Any, cast

import yaml
from pydantic import Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from collabrank.exceptions import ConfigurationError, check_config_keys


class CollabRankSettings(BaseSettings):
    """collabrank configuration settings.

    Settings are loaded with the following precedence (highest to lowest):
    1. CLI arguments (when provided via command flags)
       Example: collabrank analyze data.txt --top-k 20

    2. Config file values (YAML, TOML, or JSON)
       Example: collabrank --config myconfig.yaml analyze data.txt
       Multiple files: Later files override earlier ones

    3. Environment variables (prefixed with COLLABRANK_)
       Example: export COLLABRANK_TOP_K=25

    4. .env file (in current directory or specified path)
       Example: COLLABRANK_LOG_LEVEL=DEBUG in .env file

    5. Default values (defined in field declarations below)
    """

    model_config = SettingsConfigDict(
        env_prefix="COLLABRANK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Ranking settings
    top_k: int = Field(
        default=10,
        description="Number of top nodes to report per centrality metric",
        ge=1,
    )

    # Eigenvector power iteration
    eigenvector_max_iterations: int = Field(
        default=100,
        description="Iteration cap for eigenvector power iteration",
        ge=1,
    )
    eigenvector_tolerance: float = Field(
        default=1e-6,
        description="Max absolute change between iterations that counts as converged",
        gt=0.0,
    )
    eigenvector_display_scale: int = Field(
        default=1_000_000,
        description="Multiplier applied to eigenvector scores for integer display",
        gt=0,
    )

    # Execution settings
    parallel_metrics: bool = Field(
        default=False,
        description="Compute the three centrality metrics on worker threads",
    )

    # Visualization settings
    render_image: bool = Field(
        default=True,
        description="Render the graph to a PNG image after analysis",
    )
    output_dir: Path = Field(
        default_factory=lambda: Path.cwd() / "output",
        description="Directory for rendered images",
    )
    image_filename: str = Field(
        default="network.png",
        description="File name of the rendered graph image",
        min_length=1,
    )
    image_width: int = Field(
        default=1024,
        description="Rendered image width in pixels",
        ge=16,
    )
    image_height: int = Field(
        default=768,
        description="Rendered image height in pixels",
        ge=16,
    )

    # Debug settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )

    # Logging settings
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    log_format: str = Field(
        default="console",
        description="Log output format (console, json, structured)",
        pattern="^(console|json|structured)$",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional log file path",
    )

    @field_validator("output_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Any) -> Path | None:
        """Expand environment variables and resolve path.

        Accepts None (for optional fields), str (with env var and ~
        expansion) and Path. Collection types are rejected.
        """
        if v is None:
            return None
        if isinstance(v, str):
            expanded = os.path.expandvars(v)
            return Path(expanded).expanduser().resolve()
        if isinstance(v, Path):
            return v.resolve()

        if isinstance(v, (dict, list, set, tuple)):  # noqa: UP038
            raise ValueError(
                f"Path fields cannot accept {type(v).__name__} types. "
                f"Expected str or Path, got: {v!r}"
            )

        try:
            return Path(str(v)).resolve()
        except (TypeError, ValueError, OSError) as e:
            raise ValueError(
                f"Path fields must be string, Path, or convertible to string. "
                f"Got {type(v).__name__}: {v!r}"
            ) from e

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        """Normalize log level to uppercase for case-insensitive handling."""
        if isinstance(v, str):
            return v.upper()
        raise ValueError(f"log_level must be a string, got {type(v).__name__}")

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, v: Any) -> str:
        """Normalize log format to lowercase for case-insensitive handling."""
        if isinstance(v, str):
            return v.lower()
        raise ValueError(f"log_format must be a string, got {type(v).__name__}")

    @property
    def image_path(self) -> Path:
        """Full path of the rendered graph image."""
        return self.output_dir / self.image_filename

    @classmethod
    def from_env(cls) -> CollabRankSettings:
        """Create settings from environment variables."""
        return cls()

    @classmethod
    def from_file(cls, config_path: Path | str) -> CollabRankSettings:
        """Load settings from a configuration file.

        Args:
            config_path: Path to configuration file (YAML, TOML, or JSON).

        Returns:
            Settings loaded from the file.

        Raises:
            ConfigurationError: If the format is not supported or a value is
                invalid.
            FileNotFoundError: If config file doesn't exist.
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        suffix = config_path.suffix.lower()

        if suffix in {".yml", ".yaml"}:
            with config_path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        elif suffix == ".toml":
            with config_path.open("rb") as f:
                data = tomllib.load(f)
        elif suffix == ".json":
            with config_path.open(encoding="utf-8") as f:
                data = json.load(f)
        else:
            raise ConfigurationError(
                message=f"Unsupported configuration file format: {suffix}",
                hint="Use one of the supported formats: .yml, .yaml, .toml, or .json",
                details={
                    "file": str(config_path),
                    "detected_format": suffix,
                    "supported_formats": [".yml", ".yaml", ".toml", ".json"],
                },
            )

        if not isinstance(data, dict):
            raise ConfigurationError(
                message="Configuration file must contain a mapping at the top level",
                details={"file": str(config_path), "found": type(data).__name__},
            )

        check_config_keys(data)

        try:
            return cls(**data)
        except PydanticValidationError as e:
            errors = e.errors()
            raise ConfigurationError(
                message=f"Invalid value in configuration file: {config_path}",
                hint="; ".join(
                    f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                    for err in errors
                ),
                details={"file": str(config_path), "error_count": len(errors)},
            ) from e

    @classmethod
    def from_multiple_sources(
        cls,
        config_files: list[Path | str] | None = None,
        env_file: Path | str | None = None,
        cli_args: dict[str, Any] | None = None,
    ) -> CollabRankSettings:
        """Load settings with proper precedence from multiple sources.

        Precedence (highest to lowest):
        1. CLI arguments
        2. Config files (last file wins)
        3. Environment variables
        4. .env file
        5. Default values

        Args:
            config_files: List of config files to load (later files override earlier).
            env_file: Path to .env file (default: .env in current directory).
            cli_args: Dictionary of CLI arguments.

        Returns:
            Merged settings from all sources.
        """
        data: dict[str, Any] = {}

        if config_files:
            for config_file in config_files:
                try:
                    file_settings = cls.from_file(config_file)
                    # Only keys present in the file override env and defaults
                    data.update(file_settings.model_dump(exclude_unset=True))
                except FileNotFoundError:
                    from collabrank.config.logging import get_logger as _get_logger

                    logger = _get_logger("collabrank.config.settings")
                    logger.warning(
                        "Configuration file not found, using defaults",
                        config_file=str(config_file),
                    )

        if env_file:
            # pydantic-settings v2 supports the _env_file parameter
            settings = cast(
                "CollabRankSettings", cast(Any, cls)(_env_file=env_file, **data)
            )
        else:
            settings = cls(**data)

        if cli_args:
            cli_data = {k: v for k, v in cli_args.items() if v is not None}
            if cli_data:
                updated_data = settings.model_dump()
                updated_data.update(cli_data)
                settings = cls(**updated_data)

        return settings


# Global settings instance
_settings: CollabRankSettings | None = None
# Cache for config file paths that exist
_config_paths_cache: list[Path | str] | None = None


def _get_config_paths() -> list[Path | str]:
    """Get list of config file paths to check.

    Returns paths in priority order (later files override earlier).
    """
    global _config_paths_cache

    if _config_paths_cache is not None:
        return _config_paths_cache

    potential_paths = [
        Path.home() / ".config" / "collabrank" / "config.yaml",
        Path.home() / ".config" / "collabrank" / "config.toml",
        Path.home() / ".config" / "collabrank" / "config.json",
        Path.cwd() / "collabrank.yaml",
        Path.cwd() / "collabrank.toml",
        Path.cwd() / "collabrank.json",
    ]

    existing_paths: list[Path | str] = []
    for path in potential_paths:
        try:
            if path.exists() and path.is_file():
                existing_paths.append(path)
        except (OSError, PermissionError):
            continue

    _config_paths_cache = existing_paths
    return existing_paths


def get_settings() -> CollabRankSettings:
    """Get the global settings instance.

    Loads configuration from config files and the environment on first use.

    Returns:
        Global CollabRankSettings instance.
    """
    global _settings
    if _settings is None:
        config_paths = _get_config_paths()

        if config_paths:
            _settings = CollabRankSettings.from_multiple_sources(
                config_files=config_paths
            )
        else:
            _settings = CollabRankSettings.from_env()
    return _settings


def set_settings(settings: CollabRankSettings) -> None:
    """Set the global settings instance.

    Args:
        settings: Settings instance to use globally.
    """
    global _settings
    _settings = settings


def clear_settings_cache() -> None:
    """Clear the global settings cache.

    This forces get_settings() to re-read from environment variables
    and configuration files on the next call.
    """
    global _settings, _config_paths_cache
    _settings = None
    _config_paths_cache = None


def get_settings_for_cli(
    config_file: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> CollabRankSettings:
    """Get settings for CLI commands with consistent precedence.

    Args:
        config_file: Optional specific config file to load. If not provided,
                    uses standard config locations.
        cli_overrides: Dictionary of CLI argument overrides (e.g., top_k).
                      Only non-None values are applied.

    Returns:
        CollabRankSettings instance with all sources merged.

    Raises:
        FileNotFoundError: If config_file is specified but doesn't exist.
    """
    if config_file is not None:
        if not Path(config_file).exists():
            raise FileNotFoundError(f"Configuration file not found: {config_file}")
        return CollabRankSettings.from_multiple_sources(
            config_files=[config_file],
            cli_args=cli_overrides,
        )

    settings = get_settings()
    cli_data = {k: v for k, v in (cli_overrides or {}).items() if v is not None}
    if not cli_data:
        return settings
    return CollabRankSettings(**{**settings.model_dump(), **cli_data})
