"""License resolver reading the installed package database."""

import logging
from pathlib import Path
from typing import Optional

from license_auditor.constants import DEFAULT_PACKAGE_DB, LICENSE_METADATA_FILE
from license_auditor.resolvers.base import BaseResolver

logger = logging.getLogger(__name__)


class VdbLicenseResolver(BaseResolver):
    """Resolver that reads LICENSE metadata from ``<db>/<category>/<name>/``."""

    def __init__(self, db_path: Path = DEFAULT_PACKAGE_DB) -> None:
        self._db_path = db_path

    def resolve(self, category: str, name: str) -> Optional[str]:
        """Read the recorded license expression of a package.

        Args:
            category: Package category.
            name: Package directory name including version.

        Returns:
            The expression with runs of whitespace collapsed, or None if
            the metadata file is missing or unreadable.
        """
        path = self._db_path / category / name / LICENSE_METADATA_FILE
        try:
            content = path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.debug("No license metadata for %s/%s: %s", category, name, e)
            return None
        return " ".join(content.split())
