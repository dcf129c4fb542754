"""License analysis logic for license-auditor."""
from license_auditor.analysis.classifier import LicenseClassifier
from license_auditor.analysis.filtering import FilterResult, filter_ignored_packages
from license_auditor.analysis.groups import GroupRegistry, parse_group_definitions
from license_auditor.analysis.overrides import apply_license_overrides
from license_auditor.analysis.tokens import Token, TokenKind, tokenize

__all__ = [
    "FilterResult",
    "GroupRegistry",
    "LicenseClassifier",
    "Token",
    "TokenKind",
    "apply_license_overrides",
    "filter_ignored_packages",
    "parse_group_definitions",
    "tokenize",
]
