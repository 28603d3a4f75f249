"""Configuration file loader for verbump.

Handles discovery, loading, parsing, and validation of configuration files.
Supports two formats:

- ``verbump.toml``: settings under ``[verbump]`` table
- ``pyproject.toml``: settings under ``[tool.verbump]`` table

Discovery order:

1. Explicit path from ``--config`` or ``VERBUMP_CONFIG``
2. ``verbump.toml`` in current directory
3. ``pyproject.toml`` with ``[tool.verbump]`` section

Configuration precedence: defaults < language policy < config file < CLI args.

Example (``verbump.toml``)::

    [verbump]
    language = "rust"
    bump_version_core = false
"""

from __future__ import annotations

import tomli as tomllib
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, field, replace

from verbump.exceptions import ConfigError
from verbump.utils.logger import get_logger
from verbump.core.derive import DeriveNextOptions, options_for_language
from verbump.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME

logger = get_logger("config")

_BOOLEAN_OPTIONS = ("bump_version_core", "downgrade_pre_ga_changes")
_KNOWN_OPTIONS = frozenset({"language", *_BOOLEAN_OPTIONS})


@dataclass
class VerbumpConfig:
    """Parsed and validated verbump configuration.

    Boolean options default to ``None``, meaning "not set": the language
    policy (or the built-in default) applies.

    Attributes:
        language: Language whose versioning policy to start from
            (e.g. ``"rust"``).
        bump_version_core: Override for
            :attr:`DeriveNextOptions.bump_version_core`.
        downgrade_pre_ga_changes: Override for
            :attr:`DeriveNextOptions.downgrade_pre_ga_changes`.
        source_path: Path to loaded config file, or ``None`` if using defaults.
    """

    language: Optional[str] = None
    bump_version_core: Optional[bool] = None
    downgrade_pre_ga_changes: Optional[bool] = None

    # Metadata (not a user-facing option)
    source_path: Optional[Path] = field(default=None, repr=False)

    def derive_options(
        self,
        *,
        language: Optional[str] = None,
        bump_version_core: Optional[bool] = None,
        downgrade_pre_ga_changes: Optional[bool] = None,
    ) -> DeriveNextOptions:
        """Resolve the effective derivation options.

        Keyword arguments are command-line overrides; ``None`` leaves the
        configured value in place.

        Returns:
            Language policy options with every explicitly set value applied.
        """
        options = options_for_language(language or self.language)

        overrides: Dict[str, bool] = {}
        for name, cli_value in (
            ("bump_version_core", bump_version_core),
            ("downgrade_pre_ga_changes", downgrade_pre_ga_changes),
        ):
            value = cli_value if cli_value is not None else getattr(self, name)
            if value is not None:
                overrides[name] = value

        return replace(options, **overrides)

    def to_log_dict(self) -> Dict[str, Any]:
        """Return configuration as dictionary for debug logging."""
        return {
            "language": self.language,
            "bump_version_core": self.bump_version_core,
            "downgrade_pre_ga_changes": self.downgrade_pre_ga_changes,
        }


def discover_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Find the configuration file to load.

    Args:
        explicit_path: Explicit config path. If provided, must exist.

    Returns:
        Resolved path to config file, or ``None`` if not found.

    Raises:
        ConfigError: Explicit path provided but does not exist.
    """
    if explicit_path is not None:
        resolved = explicit_path.resolve()
        if not resolved.is_file():
            raise ConfigError(
                f"Configuration file not found: {explicit_path}",
                config_path=str(explicit_path),
            )
        logger.debug("Using explicit config: %s", resolved)
        return resolved

    cwd = Path.cwd()

    verbump_toml = cwd / CONFIG_FILE_NAME
    if verbump_toml.is_file():
        logger.debug("Found %s: %s", CONFIG_FILE_NAME, verbump_toml)
        return verbump_toml

    pyproject_toml = cwd / PYPROJECT_FILE_NAME
    if pyproject_toml.is_file() and _pyproject_has_verbump_section(pyproject_toml):
        logger.debug("Found [tool.verbump] in %s", pyproject_toml)
        return pyproject_toml

    logger.debug("No configuration file found")
    return None


def _pyproject_has_verbump_section(path: Path) -> bool:
    """Return True if ``path`` parses and has a ``[tool.verbump]`` table.

    An unreadable or malformed ``pyproject.toml`` is treated as having no
    section so discovery falls back to defaults.
    """
    try:
        raw = _read_toml(path)
    except ConfigError as exc:
        logger.debug("Ignoring %s: %s", path, exc)
        return False
    tool = raw.get("tool")
    return isinstance(tool, dict) and "verbump" in tool


def load_config(config_path: Optional[Path] = None) -> VerbumpConfig:
    """Load and validate verbump configuration.

    Args:
        config_path: Explicit path to config file. If ``None``, uses
            auto-discovery (see :func:`discover_config_file`).

    Returns:
        Validated :class:`VerbumpConfig` with values from file or defaults.

    Raises:
        ConfigError: File cannot be parsed, has unknown keys, or invalid values.
    """
    resolved = discover_config_file(config_path)

    if resolved is None:
        logger.debug("No config file found, using defaults")
        return VerbumpConfig()

    logger.info("Loading configuration from %s", resolved)
    raw = _read_toml(resolved)

    if resolved.name == PYPROJECT_FILE_NAME:
        tool = _require_table(raw.get("tool", {}), "tool", config_path=resolved)
        section = _require_table(
            tool.get("verbump", {}), "tool.verbump", config_path=resolved
        )
    else:
        section = _require_table(
            raw.get("verbump", {}), "verbump", config_path=resolved
        )

    if not section:
        logger.debug("Config file found but no verbump section, using defaults")
        return VerbumpConfig(source_path=resolved)

    config = _parse_section(section, config_path=str(resolved))
    config.source_path = resolved

    logger.debug("Loaded configuration: %s", config.to_log_dict())
    return config


def _require_table(value: Any, key: str, *, config_path: Path) -> Dict[str, Any]:
    """Return ``value`` if it is a TOML table, else raise :class:`ConfigError`."""
    if not isinstance(value, dict):
        raise ConfigError(
            f"[{key}] must be a table, got {type(value).__name__}",
            config_path=str(config_path),
        )
    return value


def _read_toml(path: Path) -> Dict[str, Any]:
    """Read and parse a TOML file.

    Raises:
        ConfigError: File cannot be read or is not valid TOML.
    """
    try:
        with open(path, "rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(
            f"Invalid TOML in {path.name}: {exc}",
            config_path=str(path),
        ) from exc
    except OSError as exc:
        raise ConfigError(
            f"Cannot read configuration file {path}: {exc}",
            config_path=str(path),
        ) from exc


def _parse_section(
    section: Dict[str, Any],
    *,
    config_path: str,
) -> VerbumpConfig:
    """Validate a ``[verbump]`` / ``[tool.verbump]`` table.

    Raises:
        ConfigError: Unknown keys or incorrect types.
    """
    unknown = set(section.keys()) - _KNOWN_OPTIONS
    if unknown:
        raise ConfigError(
            f"Unknown configuration keys: {', '.join(sorted(unknown))}",
            config_path=config_path,
        )

    config = VerbumpConfig()

    if "language" in section:
        val = section["language"]
        if not isinstance(val, str) or not val.strip():
            raise ConfigError(
                f"language must be a non-empty string, got {type(val).__name__}",
                config_path=config_path,
                option="language",
            )
        config.language = val.strip().lower()

    for option in _BOOLEAN_OPTIONS:
        if option not in section:
            continue
        val = section[option]
        if not isinstance(val, bool):
            raise ConfigError(
                f"{option} must be a boolean, got {type(val).__name__}",
                config_path=config_path,
                option=option,
            )
        setattr(config, option, val)

    return config
