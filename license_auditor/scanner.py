"""Scanner module for package discovery and license classification."""
import logging
import os
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn

from license_auditor.analysis.classifier import LicenseClassifier
from license_auditor.analysis.groups import GroupRegistry
from license_auditor.constants import (
    LICENSE_GROUPS_CANDIDATES,
    LICENSE_GROUPS_RELATIVE,
)
from license_auditor.exceptions import DefinitionsUnavailableError, ScanError
from license_auditor.models.scan import (
    AuditResult,
    IgnoredPackagesSummary,
    InstalledPackage,
)
from license_auditor.resolvers.base import BaseResolver

logger = logging.getLogger(__name__)

# Package manager bookkeeping entries in the package database
_SKIPPED_PREFIXES = (".", "-MERGING-")


def find_license_groups_file(explicit_path: Optional[str] = None) -> Path:
    """Locate the license_groups definitions file.

    Search order:
    1. ``explicit_path`` (command line flag or configuration)
    2. ``$PORTDIR/profiles/license_groups``
    3. The well-known repository locations

    Args:
        explicit_path: Path chosen by the user, used as-is when given.

    Returns:
        Path to the definitions file.

    Raises:
        DefinitionsUnavailableError: If no definitions file can be found.
    """
    if explicit_path is not None:
        path = Path(explicit_path)
        if not path.is_file():
            raise DefinitionsUnavailableError(
                f"License group definitions not found at '{path}'"
            )
        return path

    candidates: list[Path] = []
    portdir = os.environ.get("PORTDIR")
    if portdir:
        candidates.append(Path(portdir) / LICENSE_GROUPS_RELATIVE)
    candidates.extend(LICENSE_GROUPS_CANDIDATES)

    for candidate in candidates:
        if candidate.is_file():
            logger.debug("Using license group definitions %s", candidate)
            return candidate

    searched = ", ".join(str(c) for c in candidates)
    raise DefinitionsUnavailableError(
        f"No license group definitions found (searched: {searched})"
    )


def load_group_registry(explicit_path: Optional[str] = None) -> GroupRegistry:
    """Locate and parse the license group definitions.

    Raises:
        DefinitionsUnavailableError: If the definitions cannot be found or read.
    """
    return GroupRegistry.from_file(find_license_groups_file(explicit_path))


def discover_packages(db_path: Path) -> list[InstalledPackage]:
    """Discover all packages recorded in the installed package database.

    Args:
        db_path: Root of the database, laid out as ``<category>/<name>/``.

    Returns:
        List of InstalledPackage sorted by category and name, with the
        license field left None (to be populated by a resolver).

    Raises:
        ScanError: If the database directory cannot be listed.
    """
    packages: list[InstalledPackage] = []

    try:
        categories = sorted(p for p in db_path.iterdir() if p.is_dir())
        for category_dir in categories:
            if category_dir.name.startswith(_SKIPPED_PREFIXES):
                continue
            for package_dir in sorted(category_dir.iterdir()):
                if not package_dir.is_dir() or package_dir.name.startswith(
                    _SKIPPED_PREFIXES
                ):
                    continue
                packages.append(
                    InstalledPackage(category=category_dir.name, name=package_dir.name)
                )
    except OSError as e:
        raise ScanError(f"Cannot read package database '{db_path}': {e}") from e

    logger.debug("Discovered %d installed packages in %s", len(packages), db_path)
    return packages


def resolve_licenses(
    packages: list[InstalledPackage],
    resolver: BaseResolver,
    console: Optional[Console] = None,
    show_progress: bool = True,
) -> list[InstalledPackage]:
    """Read the license expression of every package.

    Args:
        packages: Packages to resolve.
        resolver: Resolver used to read each package's license metadata.
        console: Optional Rich Console for progress display.
        show_progress: Whether to show progress indicator (default: True).

    Returns:
        Packages in the same order, with the license field populated where
        the metadata could be read and None otherwise.
    """

    def resolve_one(pkg: InstalledPackage) -> InstalledPackage:
        license_expr = resolver.resolve(pkg.category, pkg.name)
        return pkg.model_copy(update={"license": license_expr})

    if console is None or not show_progress or not packages:
        return [resolve_one(pkg) for pkg in packages]

    resolved: list[InstalledPackage] = []
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        console=console,
        transient=True,
    ) as progress:
        task_id = progress.add_task(
            f"Reading licenses of {len(packages)} packages...",
            total=len(packages),
        )
        for pkg in packages:
            resolved.append(resolve_one(pkg))
            progress.advance(task_id)
    return resolved


def audit_packages(
    packages: list[InstalledPackage],
    classifier: LicenseClassifier,
    reference_group: str,
    ignored_summary: Optional[IgnoredPackagesSummary] = None,
) -> AuditResult:
    """Classify every package against the reference group.

    Packages whose license metadata could not be read are not classified
    and are listed as unresolved instead.

    Args:
        packages: Packages with resolved license expressions.
        classifier: Classifier backed by the loaded group registry.
        reference_group: Group whose members count as free.
        ignored_summary: Optional summary of ignored packages.

    Returns:
        AuditResult aggregating one verdict per classified package.
    """
    result = AuditResult(
        reference_group=reference_group,
        ignored_packages_summary=ignored_summary,
    )
    if reference_group not in classifier.registry:
        logger.warning(
            "Reference group %s is not defined, every license will be non-free",
            reference_group,
        )

    for pkg in packages:
        if pkg.license is None:
            result.unresolved.append(pkg)
            continue
        result.record(pkg, classifier.classify(pkg.license, reference_group))

    return result
