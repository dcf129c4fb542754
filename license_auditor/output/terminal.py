"""Terminal output formatter using Rich."""
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from license_auditor.analysis.groups import GroupRegistry
from license_auditor.constants import LEGAL_DISCLAIMER_SHORT
from license_auditor.models.scan import AuditResult, PackageVerdict, Verbosity
from license_auditor.models.verdict import Classification, Verdict

VERDICT_STYLES: dict[Verdict, str] = {
    Verdict.FREE: "green",
    Verdict.NON_FREE: "red",
    Verdict.MAYBE_NON_FREE: "yellow",
}

VERDICT_LABELS: dict[Verdict, str] = {
    Verdict.FREE: "free",
    Verdict.NON_FREE: "non-free",
    Verdict.MAYBE_NON_FREE: "maybe non-free",
}


def _styled(verdict: Verdict, text: Optional[str] = None) -> str:
    style = VERDICT_STYLES[verdict]
    return f"[{style}]{escape(text or VERDICT_LABELS[verdict])}[/{style}]"


class TerminalFormatter:
    """Format audit results for terminal display using Rich.

    Colour comes from Rich markup; pass a Console created with
    ``no_color=True`` for plain output.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        verbosity: Verbosity = Verbosity.NORMAL,
    ) -> None:
        """Initialize the formatter with a Rich console.

        Args:
            console: Optional Rich Console instance. If not provided,
                a new Console will be created.
            verbosity: Output verbosity level.
        """
        self._console = console if console is not None else Console()
        self._verbosity = verbosity

    def format_audit_result(self, result: AuditResult) -> None:
        """Display audit results as a summary panel and a Rich table.

        Normal verbosity lists only packages that are not free, verbose
        lists every package and quiet prints a status line and offenders.

        Args:
            result: The audit result to display.
        """
        if self._verbosity == Verbosity.QUIET:
            self._print_quiet_output(result)
            return

        if result.total_packages == 0 and not result.unresolved:
            self._print_disclaimer()
            self._console.print("[yellow]No packages found[/yellow]")
            return

        self._print_summary(result)
        self._print_disclaimer()

        if self._verbosity == Verbosity.VERBOSE:
            rows = result.packages
            title = f"License Audit Results ({result.reference_group})"
        else:
            rows = result.with_verdict(Verdict.NON_FREE, Verdict.MAYBE_NON_FREE)
            title = f"Packages Not Free Under {result.reference_group}"

        if rows:
            self._console.print(self._build_table(rows, title))
        else:
            self._console.print(
                f"[green]Every package is free under {result.reference_group}[/green]"
            )

        if result.unresolved:
            self._print_unresolved(result)

        self._console.print(f"\n[bold]Total packages:[/bold] {result.total_packages}")
        for verdict in (Verdict.NON_FREE, Verdict.MAYBE_NON_FREE):
            self._console.print(
                f"[bold]{VERDICT_LABELS[verdict].capitalize()}:[/bold] "
                f"{result.count(verdict)} ({result.percentage(verdict):.1f}%)"
            )

    def _build_table(self, rows: list[PackageVerdict], title: str) -> Table:
        table = Table(title=title)
        table.add_column("Package", style="cyan", no_wrap=True)
        table.add_column("Verdict")
        table.add_column("License")
        table.add_column("Expression", style="magenta")

        for pv in rows:
            expression = escape(pv.package.license or "")
            if pv.package.is_overridden:
                if self._verbosity == Verbosity.VERBOSE:
                    original = escape(pv.package.original_license or "Unknown")
                    reason = escape(pv.package.override_reason or "")
                    expression += (
                        f" [blue]\\[override: was {original}, reason: {reason}][/blue]"
                    )
                else:
                    expression += " [blue]\\[override][/blue]"
            table.add_row(
                escape(pv.package.atom),
                _styled(pv.verdict),
                _styled(pv.verdict, pv.classification.license or "-"),
                expression,
            )
        return table

    def _print_quiet_output(self, result: AuditResult) -> None:
        """Print minimal output for quiet mode."""
        if result.total_packages == 0 and not result.unresolved:
            self._console.print("[yellow]No packages found[/yellow]")
            return

        if result.has_issues:
            offenders = result.non_free_count + result.maybe_non_free_count
            self._console.print(
                f"[red]NON-FREE FOUND[/red] - {offenders} of "
                f"{result.total_packages} package(s) not free under "
                f"{result.reference_group}"
            )
            for pv in result.with_verdict(Verdict.NON_FREE, Verdict.MAYBE_NON_FREE):
                self._console.print(
                    f"  - {escape(pv.package.atom)}: "
                    f"{_styled(pv.verdict, pv.classification.license)}"
                )
        else:
            self._console.print(
                f"[green]PASS[/green] - All {result.total_packages} packages free "
                f"under {result.reference_group}"
            )

        if result.unresolved:
            self._console.print(
                f"[yellow]{len(result.unresolved)} package(s) without license metadata[/yellow]"
            )

    def _print_disclaimer(self) -> None:
        """Print legal disclaimer panel."""
        panel = Panel(
            LEGAL_DISCLAIMER_SHORT,
            title="[bold yellow]NOT LEGAL ADVICE[/bold yellow]",
            border_style="yellow",
        )
        self._console.print(panel)
        self._console.print("")

    def _print_summary(self, result: AuditResult) -> None:
        """Print the summary panel with per-verdict counts and percentages."""
        if result.has_issues:
            status, status_color = "NON-FREE FOUND", "red"
        else:
            status, status_color = "PASS", "green"

        summary_lines = [
            f"Reference Group: {result.reference_group}",
            f"Total Packages: {result.total_packages}",
        ]
        for verdict in Verdict:
            summary_lines.append(
                f"{VERDICT_LABELS[verdict].capitalize()}: {result.count(verdict)} "
                f"({result.percentage(verdict):.1f}%)"
            )
        if result.unresolved:
            summary_lines.append(f"Without License Metadata: {len(result.unresolved)}")

        ignored = result.ignored_packages_summary
        if ignored and ignored.ignored_count > 0:
            if ignored.ignored_names:
                names_str = ", ".join(ignored.ignored_names[:3])
                if len(ignored.ignored_names) > 3:
                    names_str += f", ... (+{len(ignored.ignored_names) - 3} more)"
                summary_lines.append(
                    f"Packages Ignored: {ignored.ignored_count} ({names_str})"
                )
            else:
                summary_lines.append(f"Packages Ignored: {ignored.ignored_count}")

        overrides_count = sum(1 for pv in result.packages if pv.package.is_overridden)
        if overrides_count > 0:
            summary_lines.append(f"Overrides Applied: {overrides_count}")

        summary_lines.extend(["", f"Status: [{status_color}]{status}[/{status_color}]"])

        panel = Panel(
            "\n".join(summary_lines),
            title="[bold]SUMMARY[/bold]",
            border_style=status_color,
        )
        self._console.print(panel)
        self._console.print("")

    def _print_unresolved(self, result: AuditResult) -> None:
        self._console.print("")
        self._console.print(
            f"[bold yellow]Without License Metadata ({len(result.unresolved)})"
            "[/bold yellow]"
        )
        for pkg in result.unresolved:
            self._console.print(f"  [yellow]?[/yellow] {escape(pkg.atom)}")

    def format_classification(
        self,
        expression: str,
        reference_group: str,
        classification: Classification,
    ) -> None:
        """Display the verdict for a single license expression."""
        line = (
            f"{escape(expression)} under {reference_group}: "
            f"{_styled(classification.verdict)}"
        )
        if classification.license is not None:
            line += f" (because of {_styled(classification.verdict, classification.license)})"
        self._console.print(line)

    def format_groups(self, registry: GroupRegistry) -> None:
        """Display every defined group with its direct members."""
        table = Table(title="License Groups")
        table.add_column("Group", style="cyan", no_wrap=True)
        table.add_column("Members")
        for name in registry.group_names:
            group = registry.get(name)
            members = " ".join(group.members) if group is not None else ""
            table.add_row(escape(name), escape(members))
        self._console.print(table)

    def format_group_expansion(self, registry: GroupRegistry, group_name: str) -> None:
        """Display every license reachable from one group."""
        group = registry.get(group_name)
        if group is None:
            self._console.print(f"[red]Unknown license group: {escape(group_name)}[/red]")
            return

        licenses = registry.expand(group_name)
        self._console.print(
            f"[bold]{escape(group_name)}[/bold] "
            f"({len(licenses)} licenses, references: "
            f"{escape(', '.join(group.references)) or 'none'})"
        )
        for license_id in licenses:
            self._console.print(f"  {escape(license_id)}")
