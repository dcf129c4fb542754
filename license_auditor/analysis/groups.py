"""License group registry built from license_groups definitions.

The definitions text has one group per line, ``NAME member member ...``,
where a member is a license identifier or ``@OTHER`` to include another
group. Lines starting with ``#`` and blank lines are ignored.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, Optional

from license_auditor.constants import COMMENT_MARKER, GROUP_REFERENCE_MARKER
from license_auditor.exceptions import DefinitionsUnavailableError
from license_auditor.models.groups import LicenseGroup, is_group_reference

logger = logging.getLogger(__name__)


def parse_group_definitions(text: str) -> dict[str, LicenseGroup]:
    """Parse license_groups text into groups keyed by name.

    Args:
        text: Newline-delimited definitions.

    Returns:
        Mapping of group name to LicenseGroup, in definition order.
        A repeated name replaces the earlier definition.
    """
    groups: dict[str, LicenseGroup] = {}
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith(COMMENT_MARKER):
            continue

        name, *members = line.split()
        if name in groups:
            logger.warning(
                "License group %s redefined on line %d, earlier definition dropped",
                name,
                lineno,
            )
        groups[name] = LicenseGroup(name=name, members=tuple(members))
    return groups


class GroupRegistry:
    """Read-only hierarchy of named license groups.

    Built once at startup and shared by every classification. Group
    references are resolved lazily on each query.
    """

    def __init__(self, groups: Optional[dict[str, LicenseGroup]] = None) -> None:
        self._groups: dict[str, LicenseGroup] = dict(groups or {})

    @classmethod
    def from_text(cls, text: str) -> GroupRegistry:
        """Build a registry from license_groups text."""
        return cls(parse_group_definitions(text))

    @classmethod
    def from_file(cls, path: Path) -> GroupRegistry:
        """Build a registry from a license_groups file.

        Args:
            path: Path to the definitions file.

        Returns:
            GroupRegistry holding every group in the file.

        Raises:
            DefinitionsUnavailableError: If the file is missing or unreadable.
        """
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DefinitionsUnavailableError(
                f"Cannot read license group definitions '{path}': {e}"
            ) from e

        registry = cls.from_text(text)
        logger.debug("Loaded %d license groups from %s", len(registry), path)
        for name, missing in registry.missing_references().items():
            logger.warning(
                "License group %s references undefined group(s): %s",
                name,
                ", ".join(missing),
            )
        return registry

    def __len__(self) -> int:
        return len(self._groups)

    def __contains__(self, name: object) -> bool:
        return name in self._groups

    @property
    def group_names(self) -> list[str]:
        """Sorted names of all defined groups."""
        return sorted(self._groups)

    def get(self, name: str) -> Optional[LicenseGroup]:
        """Return the group called ``name``, or None if undefined."""
        return self._groups.get(name)

    def is_license_in_group(self, license_id: str, group_name: str) -> bool:
        """Check whether a license is a direct or indirect member of a group.

        Members are searched depth-first in definition order and the search
        stops at the first match. Unknown groups have no members. Each group
        is expanded at most once per query, so cyclic references terminate.

        Args:
            license_id: License identifier to look for.
            group_name: Group to search, without the ``@`` marker.

        Returns:
            True if the license is reachable from the group.
        """
        return any(member == license_id for member in self._walk(group_name))

    def expand(self, group_name: str) -> list[str]:
        """List every license reachable from a group.

        Args:
            group_name: Group to expand, without the ``@`` marker.

        Returns:
            License identifiers in first-seen depth-first order, without
            duplicates. Empty for an unknown group.
        """
        return list(dict.fromkeys(self._walk(group_name)))

    def _walk(self, group_name: str) -> Iterator[str]:
        """Yield literal members reachable from a group, depth-first.

        Uses an explicit stack of member iterators so long reference chains
        do not hit the recursion limit. A group already entered is skipped.
        """
        visited = {group_name}
        stack = [self._members(group_name)]
        while stack:
            member = next(stack[-1], None)
            if member is None:
                stack.pop()
            elif is_group_reference(member):
                name = member[len(GROUP_REFERENCE_MARKER):]
                if name not in visited:
                    visited.add(name)
                    stack.append(self._members(name))
            else:
                yield member

    def _members(self, group_name: str) -> Iterator[str]:
        group = self._groups.get(group_name)
        return iter(group.members if group is not None else ())

    def missing_references(self) -> dict[str, list[str]]:
        """Find group references that point at undefined groups.

        Returns:
            Mapping of group name to the undefined names it references.
        """
        missing: dict[str, list[str]] = {}
        for group in self._groups.values():
            undefined = [ref for ref in group.references if ref not in self._groups]
            if undefined:
                missing[group.name] = undefined
        return missing
