"""Tests for audit models."""
import pytest

from license_auditor.models.scan import (
    AuditOptions,
    AuditResult,
    InstalledPackage,
    Verbosity,
)
from license_auditor.models.verdict import Classification, Verdict


def _pkg(name: str, license_expr: str = "MIT") -> InstalledPackage:
    return InstalledPackage(category="dev-libs", name=name, license=license_expr)


class TestInstalledPackage:
    """Tests for InstalledPackage model."""

    def test_atom(self) -> None:
        """Test atom joins category and name."""
        pkg = InstalledPackage(category="sys-apps", name="bash-5.2_p15")

        assert pkg.atom == "sys-apps/bash-5.2_p15"

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("bash-5.2_p15", "sys-apps/bash"),
            ("gcc-13.2.1_p20240113-r1", "sys-apps/gcc"),
            ("perl-Digest-SHA1-2.13", "sys-apps/perl-Digest-SHA1"),
            ("openssl-3.0.13a", "sys-apps/openssl"),
            ("editor-0-r1", "sys-apps/editor"),
            ("noversion", "sys-apps/noversion"),
        ],
    )
    def test_unversioned_atom(self, name: str, expected: str) -> None:
        """Test the version suffix is stripped from the atom."""
        assert InstalledPackage(category="sys-apps", name=name).unversioned_atom == expected

    def test_matches_prefers_versioned_atom(self) -> None:
        """Test matches returns the versioned atom when both are present."""
        pkg = InstalledPackage(category="a", name="b-1.0")

        assert pkg.matches({"a/b", "a/b-1.0"}) == "a/b-1.0"
        assert pkg.matches({"a/b"}) == "a/b"
        assert pkg.matches({"c/d"}) is None

    def test_is_overridden(self) -> None:
        """Test is_overridden follows override_reason."""
        assert InstalledPackage(category="a", name="b-1").is_overridden is False
        assert InstalledPackage(
            category="a", name="b-1", override_reason="checked"
        ).is_overridden is True


class TestAuditOptions:
    """Tests for AuditOptions model."""

    def test_defaults(self) -> None:
        """Test default format, verbosity and colour."""
        options = AuditOptions()

        assert options.format == "terminal"
        assert options.verbosity == Verbosity.NORMAL
        assert options.color is True


class TestAuditResult:
    """Tests for AuditResult aggregation."""

    def _result(self) -> AuditResult:
        result = AuditResult(reference_group="FREE")
        result.record(_pkg("a-1"), Classification(verdict=Verdict.FREE))
        result.record(_pkg("b-1"), Classification(verdict=Verdict.FREE))
        result.record(
            _pkg("c-1", "EULA"), Classification(verdict=Verdict.NON_FREE, license="EULA")
        )
        result.record(
            _pkg("d-1", "|| ( X MIT )"),
            Classification(verdict=Verdict.MAYBE_NON_FREE, license="X"),
        )
        return result

    def test_empty_result(self) -> None:
        """Test a fresh result has no packages and no issues."""
        result = AuditResult(reference_group="FREE")

        assert result.total_packages == 0
        assert result.has_issues is False
        assert result.percentage(Verdict.NON_FREE) == 0.0

    def test_counts(self) -> None:
        """Test recorded verdicts are counted per kind."""
        result = self._result()

        assert result.total_packages == 4
        assert result.free_count == 2
        assert result.non_free_count == 1
        assert result.maybe_non_free_count == 1

    def test_percentages(self) -> None:
        """Test percentages are relative to classified packages."""
        result = self._result()

        assert result.percentage(Verdict.FREE) == pytest.approx(50.0)
        assert result.percentage(Verdict.NON_FREE) == pytest.approx(25.0)
        assert result.percentage(Verdict.MAYBE_NON_FREE) == pytest.approx(25.0)

    def test_unresolved_not_counted(self) -> None:
        """Test packages without metadata do not affect the percentages."""
        result = self._result()
        result.unresolved.append(InstalledPackage(category="virtual", name="x-0"))

        assert result.total_packages == 4
        assert result.percentage(Verdict.FREE) == pytest.approx(50.0)

    def test_has_issues(self) -> None:
        """Test has_issues is set by non-free or maybe non-free verdicts."""
        assert self._result().has_issues is True

        only_maybe = AuditResult(reference_group="FREE")
        only_maybe.record(
            _pkg("d-1"), Classification(verdict=Verdict.MAYBE_NON_FREE, license="X")
        )
        assert only_maybe.has_issues is True

        only_free = AuditResult(reference_group="FREE")
        only_free.record(_pkg("a-1"), Classification(verdict=Verdict.FREE))
        assert only_free.has_issues is False

    def test_with_verdict_keeps_order(self) -> None:
        """Test with_verdict returns matching packages in recording order."""
        names = [pv.package.name for pv in self._result().with_verdict(Verdict.FREE)]

        assert names == ["a-1", "b-1"]

    def test_with_several_verdicts(self) -> None:
        """Test with_verdict accepts more than one verdict."""
        offenders = self._result().with_verdict(Verdict.NON_FREE, Verdict.MAYBE_NON_FREE)

        assert [pv.package.name for pv in offenders] == ["c-1", "d-1"]

    def test_serializes_counts(self) -> None:
        """Test computed counts appear in the serialized model."""
        data = self._result().model_dump()

        assert data["non_free_count"] == 1
        assert data["maybe_non_free_count"] == 1
        assert data["total_packages"] == 4
