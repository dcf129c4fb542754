"""Markdown output formatter for license audit results."""

from datetime import datetime, timezone

from license_auditor.constants import LEGAL_DISCLAIMER
from license_auditor.models.scan import AuditResult, PackageVerdict
from license_auditor.models.verdict import Verdict

_VERDICT_TEXT: dict[Verdict, str] = {
    Verdict.FREE: "Free",
    Verdict.NON_FREE: "Non-free",
    Verdict.MAYBE_NON_FREE: "Maybe non-free",
}


def _escape_cell(text: str) -> str:
    return text.replace("|", "\\|")


class AuditMarkdownFormatter:
    """Format audit results as Markdown output.

    Suitable for attaching a compliance report to a ticket or review.
    """

    def format_audit_result(self, result: AuditResult) -> str:
        """Format audit result as Markdown string.

        Args:
            result: The audit result to format.

        Returns:
            Markdown string representation of the audit result.
        """
        lines: list[str] = []

        lines.append("# License Audit Report")
        lines.append("")

        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        lines.append(f"*Generated: {timestamp}*")
        lines.append("")

        if result.total_packages == 0 and not result.unresolved:
            lines.extend(self._format_disclaimer())
            lines.append("")
            lines.append("*No packages found.*")
            return "\n".join(lines)

        lines.extend(self._format_summary(result))
        lines.append("")

        lines.extend(self._format_disclaimer())
        lines.append("")

        offenders = result.with_verdict(Verdict.NON_FREE, Verdict.MAYBE_NON_FREE)
        if offenders:
            lines.extend(self._format_offenders(offenders, result.reference_group))
            lines.append("")

        if result.unresolved:
            lines.append(f"## Without License Metadata ({len(result.unresolved)})")
            lines.append("")
            lines.extend(f"- `{pkg.atom}`" for pkg in result.unresolved)
            lines.append("")

        overridden = [pv for pv in result.packages if pv.package.is_overridden]
        if overridden:
            lines.extend(self._format_overrides(overridden))
            lines.append("")

        return "\n".join(lines)

    def _format_summary(self, result: AuditResult) -> list[str]:
        status = "⚠️ NON-FREE FOUND" if result.has_issues else "✅ PASS"
        lines = [
            "## Summary",
            "",
            f"**Reference group:** `{result.reference_group}`",
            "",
            "| Verdict | Packages | Share |",
            "|---------|----------|-------|",
        ]
        for verdict in Verdict:
            lines.append(
                f"| {_VERDICT_TEXT[verdict]} | {result.count(verdict)} | "
                f"{result.percentage(verdict):.1f}% |"
            )
        lines.append(f"| **Total** | {result.total_packages} | |")

        ignored = result.ignored_packages_summary
        if ignored and ignored.ignored_count > 0:
            lines.append("")
            lines.append(f"Packages ignored: {ignored.ignored_count}")

        lines.append("")
        lines.append(f"**Status:** {status}")
        return lines

    def _format_offenders(
        self, offenders: list[PackageVerdict], reference_group: str
    ) -> list[str]:
        lines = [
            f"## Packages Not Free Under {reference_group} ({len(offenders)})",
            "",
            "| Package | Verdict | License | Expression |",
            "|---------|---------|---------|------------|",
        ]
        for pv in offenders:
            lines.append(
                f"| {pv.package.atom} | {_VERDICT_TEXT[pv.verdict]} | "
                f"`{_escape_cell(pv.classification.license or '')}` | "
                f"`{_escape_cell(pv.package.license or '')}` |"
            )
        return lines

    def _format_overrides(self, overridden: list[PackageVerdict]) -> list[str]:
        lines = [
            "## Overrides Applied",
            "",
            "| Package | Original | Override | Reason |",
            "|---------|----------|----------|--------|",
        ]
        for pv in overridden:
            pkg = pv.package
            lines.append(
                f"| {pkg.atom} | `{_escape_cell(pkg.original_license or 'Unknown')}` | "
                f"`{_escape_cell(pkg.license or '')}` | "
                f"{_escape_cell(pkg.override_reason or '')} |"
            )
        return lines

    def _format_disclaimer(self) -> list[str]:
        return [
            "> **Disclaimer:** " + LEGAL_DISCLAIMER,
        ]
