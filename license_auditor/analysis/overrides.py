"""License override functionality for manual license corrections."""
from __future__ import annotations

from license_auditor.models.config import AuditorConfig
from license_auditor.models.scan import InstalledPackage


def apply_license_overrides(
    packages: list[InstalledPackage],
    config: AuditorConfig,
) -> list[InstalledPackage]:
    """Apply manual license overrides to packages.

    Overrides are applied after the license metadata is read, keeping the
    recorded expression for reporting. A versioned key takes precedence
    over an unversioned one.

    Args:
        packages: List of packages with license expressions.
        config: Configuration with overrides dict.

    Returns:
        List of InstalledPackage with overrides applied.
        If overrides is None or empty, returns packages unchanged.
    """
    if not config.overrides:
        return packages

    result: list[InstalledPackage] = []
    for pkg in packages:
        key = pkg.matches(config.overrides)
        if key is None:
            result.append(pkg)
            continue

        override = config.overrides[key]
        result.append(
            pkg.model_copy(
                update={
                    "license": override.license,
                    "original_license": pkg.license,
                    "override_reason": override.reason,
                }
            )
        )

    return result
