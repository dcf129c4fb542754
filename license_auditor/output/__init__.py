"""Output formatters for license-auditor."""

from license_auditor.output.audit_json import AuditJsonFormatter
from license_auditor.output.audit_markdown import AuditMarkdownFormatter
from license_auditor.output.terminal import TerminalFormatter

__all__ = [
    "AuditJsonFormatter",
    "AuditMarkdownFormatter",
    "TerminalFormatter",
]
