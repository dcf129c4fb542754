"""CLI entry point for license-auditor."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Literal, Optional, cast

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from license_auditor import __version__
from license_auditor.analysis.classifier import LicenseClassifier
from license_auditor.analysis.filtering import filter_ignored_packages
from license_auditor.analysis.groups import GroupRegistry
from license_auditor.analysis.overrides import apply_license_overrides
from license_auditor.config import AuditorConfig, load_config
from license_auditor.constants import (
    DEFAULT_PACKAGE_DB,
    DEFAULT_REFERENCE_GROUP,
    EXIT_ERROR,
    EXIT_ISSUES,
    EXIT_SUCCESS,
    REFERENCE_GROUPS,
)
from license_auditor.exceptions import ConfigurationError, LicenseAuditorError
from license_auditor.models.scan import (
    AuditOptions,
    AuditResult,
    Verbosity,
)
from license_auditor.output.audit_json import AuditJsonFormatter
from license_auditor.output.audit_markdown import AuditMarkdownFormatter
from license_auditor.output.terminal import TerminalFormatter
from license_auditor.resolvers.vdb import VdbLicenseResolver
from license_auditor.scanner import (
    audit_packages,
    discover_packages,
    load_group_registry,
    resolve_licenses,
)

logger = logging.getLogger(__name__)

# Module-level console for consistent output
_console = Console()
# Separate console for error and log output (writes to stderr)
_error_console = Console(stderr=True)

_group_option = click.option(
    "--group",
    "-g",
    "reference_group",
    type=click.Choice(REFERENCE_GROUPS, case_sensitive=False),
    default=None,
    help=f"License group that counts as free (default: {DEFAULT_REFERENCE_GROUP}).",
)
_license_groups_option = click.option(
    "--license-groups",
    "license_groups_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to the license_groups definitions file.",
)
_config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to configuration file.",
)
_no_color_option = click.option(
    "--no-color",
    is_flag=True,
    default=False,
    help="Print plain text without colours.",
)


def _configure_logging(debug: bool) -> None:
    """Send log records to stderr through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=_error_console, show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Log debug information to stderr.",
)
def main(debug: bool) -> None:
    """License Auditor - Report installed packages that are not free.

    Checks the license of every installed package against a license
    group from the license_groups definitions.

    \b
    Examples:
        license-auditor audit
        license-auditor audit --group OSI-APPROVED
        license-auditor audit --format json
        license-auditor check "|| ( GPL-2 MIT )"
        license-auditor groups FREE
    """
    _configure_logging(debug)


@main.command()
@_group_option
@_license_groups_option
@click.option(
    "--db",
    "db_path",
    type=click.Path(file_okay=False),
    default=None,
    help=f"Installed package database (default: {DEFAULT_PACKAGE_DB}).",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["terminal", "markdown", "json"], case_sensitive=False),
    default="terminal",
    help="Output format for audit results (default: terminal).",
)
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write report to file instead of stdout.",
)
@click.option(
    "--verbose",
    "-v",
    "verbose_flag",
    is_flag=True,
    default=False,
    help="List free packages as well.",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_flag",
    is_flag=True,
    default=False,
    help="Show only a status line and the offending packages.",
)
@_no_color_option
@_config_option
def audit(
    reference_group: str | None,
    license_groups_path: str | None,
    db_path: str | None,
    output_format: str,
    output_path: str | None,
    verbose_flag: bool,
    quiet_flag: bool,
    no_color: bool,
    config_path: str | None,
) -> None:
    """Audit installed packages against a license group.

    Reads the license of every package in the installed package
    database and reports those that are non-free or maybe non-free.

    \b
    Examples:
        license-auditor audit
        license-auditor audit --group FSF-APPROVED
        license-auditor audit --format markdown --output report.md
        license-auditor audit --quiet --no-color
    """
    if verbose_flag and quiet_flag:
        raise click.UsageError("--verbose and --quiet are mutually exclusive.")

    if quiet_flag:
        verbosity = Verbosity.QUIET
    elif verbose_flag:
        verbosity = Verbosity.VERBOSE
    else:
        verbosity = Verbosity.NORMAL

    format_value = cast(Literal["terminal", "markdown", "json"], output_format.lower())
    options = AuditOptions(format=format_value, verbosity=verbosity, color=not no_color)

    try:
        config = load_config(config_path)
        group = _resolve_reference_group(reference_group, config)
        registry = load_group_registry(license_groups_path or config.license_groups_path)

        result = _run_audit(
            registry,
            group,
            Path(db_path or config.package_db_path or DEFAULT_PACKAGE_DB),
            options,
            config,
        )
        _display_result(result, options, output_path)

        if result.has_issues:
            sys.exit(EXIT_ISSUES)
        sys.exit(EXIT_SUCCESS)

    except LicenseAuditorError as e:
        _display_error(e, options.format)
        sys.exit(EXIT_ERROR)


@main.command()
@_group_option
@_license_groups_option
@_no_color_option
@_config_option
@click.argument("expression", nargs=-1, required=True)
def check(
    reference_group: str | None,
    license_groups_path: str | None,
    no_color: bool,
    config_path: str | None,
    expression: tuple[str, ...],
) -> None:
    """Classify a single license expression.

    Exits with status 1 when the expression is not free.

    \b
    Examples:
        license-auditor check GPL-2
        license-auditor check --group OSI-APPROVED "|| ( Apache-2.0 MIT )"
    """
    expression_text = " ".join(expression)

    try:
        config = load_config(config_path)
        group = _resolve_reference_group(reference_group, config)
        registry = load_group_registry(license_groups_path or config.license_groups_path)

        classification = LicenseClassifier(registry).classify(expression_text, group)
        TerminalFormatter(console=_output_console(no_color)).format_classification(
            expression_text, group, classification
        )

        if classification.is_free:
            sys.exit(EXIT_SUCCESS)
        sys.exit(EXIT_ISSUES)

    except LicenseAuditorError as e:
        _display_error(e, "terminal")
        sys.exit(EXIT_ERROR)


@main.command()
@_license_groups_option
@_no_color_option
@_config_option
@click.argument("name", required=False)
def groups(
    license_groups_path: str | None,
    no_color: bool,
    config_path: str | None,
    name: Optional[str],
) -> None:
    """List license groups, or every license reachable from NAME.

    \b
    Examples:
        license-auditor groups
        license-auditor groups FREE-SOFTWARE
    """
    try:
        config = load_config(config_path)
        registry = load_group_registry(license_groups_path or config.license_groups_path)
        formatter = TerminalFormatter(console=_output_console(no_color))

        if name is None:
            formatter.format_groups(registry)
            sys.exit(EXIT_SUCCESS)

        formatter.format_group_expansion(registry, name)
        sys.exit(EXIT_SUCCESS if name in registry else EXIT_ISSUES)

    except LicenseAuditorError as e:
        _display_error(e, "terminal")
        sys.exit(EXIT_ERROR)


def _resolve_reference_group(flag: str | None, config: AuditorConfig) -> str:
    """Pick the reference group: flag, then config, then the default."""
    if flag is not None:
        return flag.upper()
    return config.reference_group or DEFAULT_REFERENCE_GROUP


def _output_console(no_color: bool) -> Console:
    if no_color:
        return Console(no_color=True, highlight=False)
    return _console


def _run_audit(
    registry: GroupRegistry,
    reference_group: str,
    db_path: Path,
    options: AuditOptions,
    config: AuditorConfig,
) -> AuditResult:
    """Execute the license audit.

    Args:
        registry: Loaded license group definitions.
        reference_group: Group whose members count as free.
        db_path: Root of the installed package database.
        options: Audit options.
        config: Configuration for ignored packages and overrides.

    Returns:
        AuditResult with one verdict per classified package.
    """
    packages = discover_packages(db_path)

    filter_result = filter_ignored_packages(packages, config)
    if filter_result.ignored_count:
        logger.debug("Ignoring %s", ", ".join(filter_result.ignored_names))

    show_progress = (
        options.format == "terminal" and options.verbosity != Verbosity.QUIET
    )
    resolved = resolve_licenses(
        filter_result.packages,
        VdbLicenseResolver(db_path),
        console=_error_console if show_progress else None,
        show_progress=show_progress,
    )

    # Overrides apply after reading metadata and before classification
    resolved = apply_license_overrides(resolved, config)

    logger.debug(
        "Classifying %d packages against %s", len(resolved), reference_group
    )
    return audit_packages(
        resolved, LicenseClassifier(registry), reference_group, filter_result.summary()
    )


def _write_output_to_file(content: str, path: str) -> None:
    """Write report content to file.

    Raises:
        ConfigurationError: If file cannot be written.
    """
    file_path = Path(path)

    try:
        if file_path.exists():
            _console.print(
                f"[yellow]Warning: Overwriting existing file: {path}[/yellow]"
            )
        file_path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot write to file '{path}': {e}") from e

    _console.print(f"[green]Report written to {path}[/green]")


def _display_result(
    result: AuditResult, options: AuditOptions, output_path: str | None = None
) -> None:
    """Display audit results in the specified format.

    Args:
        result: The audit result to display.
        options: Audit options including format.
        output_path: Optional file path to write output to.
    """
    if options.format == "json":
        content = AuditJsonFormatter().format_audit_result(result)
    elif options.format == "markdown":
        content = AuditMarkdownFormatter().format_audit_result(result)
    else:  # terminal
        if output_path:
            # Terminal format to file uses markdown instead
            content = AuditMarkdownFormatter().format_audit_result(result)
        else:
            TerminalFormatter(
                console=_output_console(not options.color),
                verbosity=options.verbosity,
            ).format_audit_result(result)
            return

    if output_path:
        _write_output_to_file(content, output_path)
    else:
        click.echo(content)


def _display_error(error: LicenseAuditorError, format_type: str) -> None:
    """Display error message to user on stderr."""
    error_type = type(error).__name__
    message = f"Error: {error_type}: {error}"

    if format_type == "terminal":
        _error_console.print(f"[red bold]{escape(message)}[/red bold]", highlight=False)
    else:
        click.echo(message, err=True)


if __name__ == "__main__":
    main()
