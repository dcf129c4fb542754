"""Tests for configuration file loader."""
from __future__ import annotations

from pathlib import Path

import pytest

from license_auditor.config.loader import (
    find_config_file,
    load_config,
    load_config_file,
)
from license_auditor.exceptions import ConfigurationError
from license_auditor.models.config import AuditorConfig


class TestFindConfigFile:
    """Tests for find_config_file function."""

    def test_finds_yaml_extension(self, tmp_path: Path) -> None:
        """Test that .yaml extension is found."""
        config_file = tmp_path / ".license-auditor.yaml"
        config_file.write_text("reference_group: FREE\n")

        assert find_config_file(tmp_path) == config_file

    def test_finds_yml_extension(self, tmp_path: Path) -> None:
        """Test that .yml extension is found."""
        config_file = tmp_path / ".license-auditor.yml"
        config_file.write_text("reference_group: FREE\n")

        assert find_config_file(tmp_path) == config_file

    def test_yaml_takes_precedence_over_yml(self, tmp_path: Path) -> None:
        """Test that .yaml file takes precedence over .yml."""
        yaml_file = tmp_path / ".license-auditor.yaml"
        yaml_file.write_text("reference_group: FREE\n")
        (tmp_path / ".license-auditor.yml").write_text("reference_group: MISC-FREE\n")

        assert find_config_file(tmp_path) == yaml_file

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        """Test that None is returned when no config file exists."""
        assert find_config_file(tmp_path) is None

    def test_uses_cwd_when_no_start_dir(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that current working directory is used when start_dir is None."""
        config_file = tmp_path / ".license-auditor.yaml"
        config_file.write_text("reference_group: FREE\n")
        monkeypatch.chdir(tmp_path)

        assert find_config_file() == config_file


class TestLoadConfigFile:
    """Tests for load_config_file function."""

    def test_loads_valid_config(self, tmp_path: Path) -> None:
        """Test loading a valid configuration file."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "reference_group: fsf-approved\n"
            "license_groups_path: /srv/license_groups\n"
            "package_db_path: /mnt/root/var/db/pkg\n"
            "ignored_packages:\n"
            "  - sys-firmware/blobs\n"
            "overrides:\n"
            "  media-libs/libfoo:\n"
            "    license: MIT\n"
            "    reason: Relicensed upstream\n"
        )

        result = load_config_file(config_file)

        assert isinstance(result, AuditorConfig)
        assert result.reference_group == "FSF-APPROVED"
        assert result.license_groups_path == "/srv/license_groups"
        assert result.package_db_path == "/mnt/root/var/db/pkg"
        assert result.ignored_packages == ["sys-firmware/blobs"]
        assert result.overrides is not None
        assert result.overrides["media-libs/libfoo"].license == "MIT"

    def test_empty_file_returns_defaults(self, tmp_path: Path) -> None:
        """Test that empty file returns default config."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        assert load_config_file(config_file) == AuditorConfig()

    def test_comment_only_file_returns_defaults(self, tmp_path: Path) -> None:
        """Test that a file with only comments returns default config."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("# nothing here\n")

        assert load_config_file(config_file) == AuditorConfig()

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        """Test that invalid YAML raises ConfigurationError."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("reference_group: [unclosed\n")

        with pytest.raises(ConfigurationError, match="Invalid YAML syntax"):
            load_config_file(config_file)

    def test_non_mapping_root_raises(self, tmp_path: Path) -> None:
        """Test that a list at the root raises ConfigurationError."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- FREE\n")

        with pytest.raises(ConfigurationError, match="expected a mapping"):
            load_config_file(config_file)

    def test_validation_error_names_field(self, tmp_path: Path) -> None:
        """Test that validation errors mention the offending field."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("reference_group: NONSENSE\n")

        with pytest.raises(ConfigurationError, match="reference_group"):
            load_config_file(config_file)

    def test_unknown_key_raises(self, tmp_path: Path) -> None:
        """Test that unknown keys are rejected."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("allowed_licenses:\n  - MIT\n")

        with pytest.raises(ConfigurationError, match="allowed_licenses"):
            load_config_file(config_file)

    def test_unreadable_file_raises(self, tmp_path: Path) -> None:
        """Test that a missing file raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="Cannot read"):
            load_config_file(tmp_path / "missing.yaml")

    def test_invalid_utf8_raises(self, tmp_path: Path) -> None:
        """Test that undecodable bytes raise ConfigurationError."""
        config_file = tmp_path / "config.yaml"
        config_file.write_bytes(b"reference_group: FREE\n# \xff\xfe\n")

        with pytest.raises(ConfigurationError, match="Cannot read"):
            load_config_file(config_file)


class TestLoadConfig:
    """Tests for load_config function."""

    def test_explicit_path(self, tmp_path: Path) -> None:
        """Test that an explicit path is loaded."""
        config_file = tmp_path / "custom.yaml"
        config_file.write_text("reference_group: MISC-FREE\n")

        assert load_config(str(config_file)).reference_group == "MISC-FREE"

    def test_discovers_in_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that a config file in the working directory is used."""
        (tmp_path / ".license-auditor.yaml").write_text("reference_group: OSI-APPROVED\n")
        monkeypatch.chdir(tmp_path)

        assert load_config().reference_group == "OSI-APPROVED"

    def test_defaults_without_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that defaults are used when nothing is found."""
        monkeypatch.chdir(tmp_path)

        assert load_config() == AuditorConfig()
