"""Configuration Pydantic models for license-auditor."""
from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from license_auditor.constants import REFERENCE_GROUPS


class LicenseOverride(BaseModel):
    """Manual license override for a package.

    Used when the recorded LICENSE metadata is wrong or missing.
    """

    model_config = {"extra": "forbid"}

    license: str = Field(description="License expression to use instead")
    reason: str = Field(description="Reason for the override")


class AuditorConfig(BaseModel):
    """Configuration for license-auditor.

    All fields are optional with None defaults to allow partial configuration.
    Command line flags take precedence over every field.
    """

    model_config = {"extra": "forbid"}

    reference_group: Optional[str] = Field(
        default=None,
        description="License group packages are audited against.",
    )
    license_groups_path: Optional[str] = Field(
        default=None,
        description="Path to the license_groups definitions file.",
    )
    package_db_path: Optional[str] = Field(
        default=None,
        description="Root of the installed package database.",
    )
    ignored_packages: Optional[List[str]] = Field(
        default=None,
        description="Packages (category/name or category/name-version) to skip.",
    )
    overrides: Optional[Dict[str, LicenseOverride]] = Field(
        default=None,
        description="Manual license overrides by package name.",
    )

    @field_validator("reference_group")
    @classmethod
    def _check_reference_group(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        normalized = value.strip().upper()
        if normalized not in REFERENCE_GROUPS:
            raise ValueError(
                f"must be one of {', '.join(REFERENCE_GROUPS)}, got '{value}'"
            )
        return normalized
