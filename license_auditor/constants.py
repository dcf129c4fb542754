"""Constants for license-auditor."""
from pathlib import Path

# Exit codes
EXIT_SUCCESS = 0  # Every package is free
EXIT_ISSUES = 1  # Non-free or maybe-non-free packages found
EXIT_ERROR = 2  # Audit failed due to error

# License expression markers
DISJUNCTION_MARKER = "||"
GROUP_OPEN_MARKER = "("
GROUP_CLOSE_MARKER = ")"

# license_groups file markers
GROUP_REFERENCE_MARKER = "@"
COMMENT_MARKER = "#"

# Policy groups an audit can be run against
REFERENCE_GROUPS: tuple[str, ...] = (
    "FREE",
    "FREE-SOFTWARE",
    "FREE-DOCUMENTS",
    "FSF-APPROVED",
    "OSI-APPROVED",
    "GPL-COMPATIBLE",
    "MISC-FREE",
)
DEFAULT_REFERENCE_GROUP = "FREE"

# Installed package database and its per-package license metadata file
DEFAULT_PACKAGE_DB = Path("/var/db/pkg")
LICENSE_METADATA_FILE = "LICENSE"

# Configuration files looked up in the working directory, in order
CONFIG_FILE_NAMES = (".license-auditor.yaml", ".license-auditor.yml")

# Searched in order when no license_groups path is configured
LICENSE_GROUPS_RELATIVE = Path("profiles") / "license_groups"
LICENSE_GROUPS_CANDIDATES: tuple[Path, ...] = (
    Path("/var/db/repos/gentoo") / LICENSE_GROUPS_RELATIVE,
    Path("/usr/portage") / LICENSE_GROUPS_RELATIVE,
)

# Legal disclaimer
LEGAL_DISCLAIMER = (
    "This tool reports license information for informational purposes only. "
    "It does not constitute legal advice. Consult a qualified attorney for "
    "legal guidance on license compliance."
)

# Short disclaimer for terminal display
LEGAL_DISCLAIMER_SHORT = (
    "This tool reports license information for informational purposes only. "
    "It does not constitute legal advice."
)
