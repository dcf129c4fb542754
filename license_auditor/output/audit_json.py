"""JSON output formatter for license audit results."""
import json
from datetime import datetime, timezone
from typing import Any

from license_auditor import __version__
from license_auditor.constants import LEGAL_DISCLAIMER
from license_auditor.models.scan import AuditResult
from license_auditor.models.verdict import Verdict


class AuditJsonFormatter:
    """Format audit results as JSON output.

    Provides a structured representation of license audit results
    for programmatic processing.
    """

    def format_audit_result(self, result: AuditResult) -> str:
        """Format audit result as JSON string.

        Args:
            result: The audit result to format.

        Returns:
            JSON string representation of the audit result.
        """
        output = {
            "audit_metadata": self._build_audit_metadata(result),
            "summary": self._build_summary(result),
            "packages": self._build_packages(result),
            "unresolved": [pkg.atom for pkg in result.unresolved],
        }
        return json.dumps(output, indent=2)

    def _build_audit_metadata(self, result: AuditResult) -> dict[str, Any]:
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        return {
            "generated_at": timestamp,
            "tool_version": __version__,
            "reference_group": result.reference_group,
            "disclaimer": LEGAL_DISCLAIMER,
            "disclaimer_type": "informational",
        }

    def _build_summary(self, result: AuditResult) -> dict[str, Any]:
        """Build summary section with counts and percentages per verdict."""
        ignored_packages = None
        if result.ignored_packages_summary and result.ignored_packages_summary.ignored_count > 0:
            ignored_packages = {
                "count": result.ignored_packages_summary.ignored_count,
                "names": result.ignored_packages_summary.ignored_names or [],
            }

        return {
            "total_packages": result.total_packages,
            "free": result.free_count,
            "non_free": result.non_free_count,
            "maybe_non_free": result.maybe_non_free_count,
            "percentages": {
                verdict.value: round(result.percentage(verdict), 2) for verdict in Verdict
            },
            "unresolved_count": len(result.unresolved),
            "ignored_packages": ignored_packages,
            "overrides_applied": sum(
                1 for pv in result.packages if pv.package.is_overridden
            ),
            "has_issues": result.has_issues,
            "overall_status": "NON_FREE_FOUND" if result.has_issues else "PASS",
        }

    def _build_packages(self, result: AuditResult) -> list[dict[str, Any]]:
        return [
            {
                "package": pv.package.atom,
                "license": pv.package.license,
                "verdict": pv.verdict.value,
                "implicated_license": pv.classification.license,
                "original_license": pv.package.original_license,
                "override_reason": pv.package.override_reason,
                "is_overridden": pv.package.is_overridden,
            }
            for pv in result.packages
        ]
