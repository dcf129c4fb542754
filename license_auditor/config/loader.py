"""Locate and read the .license-auditor YAML configuration."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from license_auditor.constants import CONFIG_FILE_NAMES
from license_auditor.exceptions import ConfigurationError
from license_auditor.models.config import AuditorConfig

logger = logging.getLogger(__name__)


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Return the first configuration file present in ``start_dir``.

    The ``.yaml`` spelling wins over ``.yml``. The working directory is
    searched when no directory is given.
    """
    directory = start_dir or Path.cwd()
    return next(
        (directory / name for name in CONFIG_FILE_NAMES if (directory / name).exists()),
        None,
    )


def _read_mapping(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Cannot read configuration file '{path}': {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML syntax in '{path}': {e}") from e

    # Empty or comment-only documents load as None
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Invalid configuration in '{path}': "
            f"expected a mapping at root level, got {type(data).__name__}"
        )
    return data


def load_config_file(path: Path) -> AuditorConfig:
    """Load and validate configuration from a YAML file.

    Raises:
        ConfigurationError: If the file is unreadable, is not valid YAML,
            or holds keys and values the configuration model rejects.
    """
    try:
        return AuditorConfig.model_validate(_read_mapping(path))
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'root'}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigurationError(f"Invalid configuration in '{path}': {problems}") from e


def load_config(config_path: str | None = None) -> AuditorConfig:
    """Load the explicit configuration file, a discovered one, or defaults.

    Raises:
        ConfigurationError: If the chosen configuration file is invalid.
    """
    if config_path is not None:
        return load_config_file(Path(config_path))

    discovered = find_config_file()
    if discovered is None:
        return AuditorConfig()

    logger.debug("Using configuration file %s", discovered)
    return load_config_file(discovered)
