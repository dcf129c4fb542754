"""License expression classification against a reference group."""
from __future__ import annotations

from license_auditor.analysis.groups import GroupRegistry
from license_auditor.analysis.tokens import TokenKind, tokenize
from license_auditor.models.verdict import Classification, Verdict


class LicenseClassifier:
    """Classify license expressions using a GroupRegistry.

    The expression is scanned once, left to right. Parentheses are skipped
    and ``||`` only marks that alternatives have started: the first license
    outside the reference group ends the scan, as MAYBE_NON_FREE when a
    ``||`` was seen before it and NON_FREE otherwise. An alternative listed
    after the failing license is never looked at.
    """

    def __init__(self, registry: GroupRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> GroupRegistry:
        return self._registry

    def classify(self, expression: str, reference_group: str) -> Classification:
        """Classify one license expression.

        Args:
            expression: Raw license expression of a package.
            reference_group: Group whose members count as free.

        Returns:
            Classification with the verdict and, unless FREE, the license
            that caused it.
        """
        in_disjunction = False

        for token in tokenize(expression):
            if token.kind is TokenKind.DISJUNCTION:
                in_disjunction = True
            elif token.kind is TokenKind.LITERAL:
                if self._registry.is_license_in_group(token.value, reference_group):
                    continue
                verdict = Verdict.MAYBE_NON_FREE if in_disjunction else Verdict.NON_FREE
                return Classification(verdict=verdict, license=token.value)

        return Classification(verdict=Verdict.FREE)
