"""Pydantic data models for license-auditor."""

from license_auditor.models.config import AuditorConfig, LicenseOverride
from license_auditor.models.groups import LicenseGroup, is_group_reference
from license_auditor.models.scan import (
    AuditOptions,
    AuditResult,
    IgnoredPackagesSummary,
    InstalledPackage,
    PackageVerdict,
    Verbosity,
)
from license_auditor.models.verdict import Classification, Verdict

__all__ = [
    "AuditOptions",
    "AuditResult",
    "AuditorConfig",
    "Classification",
    "IgnoredPackagesSummary",
    "InstalledPackage",
    "LicenseGroup",
    "LicenseOverride",
    "PackageVerdict",
    "Verbosity",
    "Verdict",
    "is_group_reference",
]
