"""Shared fixtures for license-auditor tests."""
from pathlib import Path
from typing import Callable, Optional

import pytest
from click.testing import CliRunner

LICENSE_GROUPS_TEXT = """\
# Sample license_groups definitions
GPL-COMPATIBLE Apache-2.0 GPL-2 GPL-2+ GPL-3 LGPL-2.1 MIT
FSF-APPROVED @GPL-COMPATIBLE Apache-1.1 MPL-1.1
OSI-APPROVED Apache-1.1 Apache-2.0 GPL-2 GPL-3 MIT MPL-1.1
MISC-FREE public-domain unicode

FREE-SOFTWARE @FSF-APPROVED @OSI-APPROVED @MISC-FREE
FREE-DOCUMENTS CC-BY-4.0 FDL-1.3
FREE @FREE-SOFTWARE @FREE-DOCUMENTS
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def license_groups_file(tmp_path: Path) -> Path:
    """Write the sample license_groups definitions to a file."""
    path = tmp_path / "license_groups"
    path.write_text(LICENSE_GROUPS_TEXT)
    return path


def _make_package(db: Path, atom: str, license_expr: Optional[str]) -> Path:
    """Create one package entry in a fake installed package database."""
    package_dir = db / atom
    package_dir.mkdir(parents=True)
    if license_expr is not None:
        (package_dir / "LICENSE").write_text(license_expr + "\n")
    return package_dir


@pytest.fixture
def package_db(tmp_path: Path) -> Path:
    """Build a small installed package database."""
    db = tmp_path / "pkg"
    _make_package(db, "app-editors/nano-7.2", "GPL-3")
    _make_package(db, "dev-libs/openssl-3.0.13", "Apache-2.0")
    _make_package(db, "media-libs/libfoo-1.0", "Foo-EULA")
    _make_package(db, "sys-firmware/blobs-20240101", "|| ( Blob-License MIT )")
    _make_package(db, "virtual/editor-0-r1", None)
    return db


@pytest.fixture
def make_package() -> Callable[[Path, str, Optional[str]], Path]:
    """Provide a helper that adds packages to a fake package database."""
    return _make_package
