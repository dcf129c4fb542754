"""Tests for constants module."""
from license_auditor.constants import (
    DEFAULT_REFERENCE_GROUP,
    EXIT_ERROR,
    EXIT_ISSUES,
    EXIT_SUCCESS,
    LEGAL_DISCLAIMER,
    LEGAL_DISCLAIMER_SHORT,
    REFERENCE_GROUPS,
)


class TestReferenceGroups:
    """Tests for the policy group constants."""

    def test_default_group_is_a_reference_group(self) -> None:
        """Test the default reference group is one of the choices."""
        assert DEFAULT_REFERENCE_GROUP in REFERENCE_GROUPS

    def test_reference_groups_are_upper_case(self) -> None:
        """Test reference group names are stored upper-case."""
        assert all(name == name.upper() for name in REFERENCE_GROUPS)


class TestExitCodes:
    """Tests for exit code constants."""

    def test_exit_codes_are_distinct(self) -> None:
        """Test that exit codes differ from each other."""
        assert len({EXIT_SUCCESS, EXIT_ISSUES, EXIT_ERROR}) == 3
        assert EXIT_SUCCESS == 0


class TestLegalDisclaimer:
    """Tests for disclaimer constants."""

    def test_disclaimer_contains_not_legal_advice(self) -> None:
        """Test LEGAL_DISCLAIMER mentions that it is not legal advice."""
        assert "legal advice" in LEGAL_DISCLAIMER.lower()

    def test_short_disclaimer_is_shorter(self) -> None:
        """Test LEGAL_DISCLAIMER_SHORT is shorter than full version."""
        assert len(LEGAL_DISCLAIMER_SHORT) < len(LEGAL_DISCLAIMER)
