"""Configuration handling for license-auditor."""
from __future__ import annotations

from license_auditor.config.loader import (
    find_config_file,
    load_config,
    load_config_file,
)
from license_auditor.models.config import AuditorConfig, LicenseOverride

__all__ = [
    "AuditorConfig",
    "LicenseOverride",
    "find_config_file",
    "load_config",
    "load_config_file",
]
