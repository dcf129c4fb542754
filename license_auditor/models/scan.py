"""Audit-related Pydantic models."""

from __future__ import annotations

import re
from enum import Enum
from typing import Collection, Literal, Optional

from pydantic import BaseModel, Field, computed_field

from license_auditor.models.verdict import Classification, Verdict

# Trailing "-<version>[-r<revision>]" of an installed package directory name
_VERSION_SUFFIX = re.compile(
    r"-\d+(\.\d+)*[a-z]?(_(alpha|beta|pre|rc|p)\d*)*(-r\d+)?$"
)


class Verbosity(Enum):
    """Output verbosity levels."""

    QUIET = "quiet"
    NORMAL = "normal"
    VERBOSE = "verbose"


class AuditOptions(BaseModel):
    """Options for a license audit."""

    model_config = {"extra": "forbid"}

    format: Literal["terminal", "markdown", "json"] = Field(
        default="terminal",
        description="Output format for audit results",
    )
    verbosity: Verbosity = Field(
        default=Verbosity.NORMAL,
        description="Output verbosity level (quiet, normal, verbose)",
    )
    color: bool = Field(default=True, description="Colorize terminal output")


class IgnoredPackagesSummary(BaseModel):
    """Summary of packages that were skipped because of ignored_packages."""

    model_config = {"extra": "forbid"}

    ignored_count: int = Field(
        default=0,
        description="Number of packages that were ignored",
    )
    ignored_names: Optional[list[str]] = Field(
        default=None,
        description="Names of packages that were ignored",
    )


class InstalledPackage(BaseModel):
    """An installed package and its raw license expression."""

    model_config = {"extra": "forbid"}

    category: str = Field(description="Package category, e.g. sys-apps")
    name: str = Field(description="Package directory name including version")
    license: Optional[str] = Field(
        default=None, description="Raw license expression, None if unreadable"
    )
    original_license: Optional[str] = Field(
        default=None, description="License expression before a manual override"
    )
    override_reason: Optional[str] = Field(
        default=None, description="Reason for a manual license override"
    )

    @property
    def atom(self) -> str:
        """Full package identifier, e.g. ``sys-apps/bash-5.2_p15``."""
        return f"{self.category}/{self.name}"

    @property
    def unversioned_atom(self) -> str:
        """Package identifier with the version stripped, e.g. ``sys-apps/bash``."""
        return f"{self.category}/{_VERSION_SUFFIX.sub('', self.name)}"

    @property
    def is_overridden(self) -> bool:
        """Check if this package has a manual override applied.

        Returns:
            True if override_reason is set, False otherwise.
        """
        return self.override_reason is not None

    def matches(self, names: Collection[str]) -> Optional[str]:
        """Return the first of atom/unversioned atom present in ``names``."""
        for candidate in (self.atom, self.unversioned_atom):
            if candidate in names:
                return candidate
        return None


class PackageVerdict(BaseModel):
    """Classification of one installed package."""

    model_config = {"extra": "forbid"}

    package: InstalledPackage
    classification: Classification

    @property
    def verdict(self) -> Verdict:
        return self.classification.verdict


class AuditResult(BaseModel):
    """Aggregated verdicts of a license audit.

    Owned by the reporting side: the audit loop records one verdict per
    package and formatters read the derived counts.
    """

    model_config = {"extra": "forbid"}

    reference_group: str = Field(description="Group the packages were audited against")
    packages: list[PackageVerdict] = Field(
        default_factory=list,
        description="Verdicts for every classified package",
    )
    unresolved: list[InstalledPackage] = Field(
        default_factory=list,
        description="Packages without readable license metadata",
    )
    ignored_packages_summary: Optional[IgnoredPackagesSummary] = Field(
        default=None,
        description="Summary of packages ignored during the audit",
    )

    def record(self, package: InstalledPackage, classification: Classification) -> None:
        """Add the verdict for one package."""
        self.packages.append(
            PackageVerdict(package=package, classification=classification)
        )

    def with_verdict(self, *verdicts: Verdict) -> list[PackageVerdict]:
        """Packages that received any of ``verdicts``, in recording order."""
        return [pv for pv in self.packages if pv.verdict in verdicts]

    def count(self, verdict: Verdict) -> int:
        return sum(1 for pv in self.packages if pv.verdict == verdict)

    def percentage(self, verdict: Verdict) -> float:
        """Share of classified packages with ``verdict``, from 0 to 100."""
        if not self.packages:
            return 0.0
        return 100.0 * self.count(verdict) / len(self.packages)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_packages(self) -> int:
        """Number of classified packages."""
        return len(self.packages)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def free_count(self) -> int:
        return self.count(Verdict.FREE)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def non_free_count(self) -> int:
        return self.count(Verdict.NON_FREE)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def maybe_non_free_count(self) -> int:
        return self.count(Verdict.MAYBE_NON_FREE)

    @property
    def has_issues(self) -> bool:
        """Check whether any package is non-free or maybe non-free.

        Returns:
            True if at least one verdict is not FREE, False otherwise.
        """
        return self.non_free_count > 0 or self.maybe_non_free_count > 0
