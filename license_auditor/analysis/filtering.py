"""Dropping packages listed under ignored_packages."""

from __future__ import annotations

from typing import NamedTuple, Optional

from license_auditor.models.config import AuditorConfig
from license_auditor.models.scan import IgnoredPackagesSummary, InstalledPackage


class FilterResult(NamedTuple):
    """Packages kept for the audit and the atoms that were skipped."""

    packages: list[InstalledPackage]
    ignored_names: list[str]

    @property
    def ignored_count(self) -> int:
        return len(self.ignored_names)

    def summary(self) -> Optional[IgnoredPackagesSummary]:
        """Summary for reports, or None when nothing was skipped."""
        if not self.ignored_names:
            return None
        return IgnoredPackagesSummary(
            ignored_count=self.ignored_count, ignored_names=self.ignored_names
        )


def filter_ignored_packages(
    packages: list[InstalledPackage],
    config: AuditorConfig,
) -> FilterResult:
    """Split off the packages named in ``config.ignored_packages``.

    An entry matches either the full ``category/name-version`` or the
    unversioned ``category/name`` of a package. Matching is case-sensitive.
    """
    ignored = set(config.ignored_packages or ())
    kept = [pkg for pkg in packages if pkg.matches(ignored) is None]
    skipped = [pkg.atom for pkg in packages if pkg.matches(ignored) is not None]
    return FilterResult(packages=kept, ignored_names=skipped)
