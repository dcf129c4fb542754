"""License group models."""
from __future__ import annotations

from pydantic import BaseModel, Field

from license_auditor.constants import GROUP_REFERENCE_MARKER


class LicenseGroup(BaseModel):
    """A named license group from the license_groups definitions.

    Members are kept in definition order. A member starting with ``@``
    refers to another group; anything else is a license identifier.
    """

    model_config = {"extra": "forbid", "frozen": True}

    name: str = Field(description="Group name")
    members: tuple[str, ...] = Field(
        default=(),
        description="Licenses and @group references in definition order",
    )

    @property
    def references(self) -> list[str]:
        """Names of groups this group refers to, without the marker."""
        return [m[len(GROUP_REFERENCE_MARKER):] for m in self.members if is_group_reference(m)]


def is_group_reference(member: str) -> bool:
    """Check whether a group member refers to another group."""
    return member.startswith(GROUP_REFERENCE_MARKER) and len(member) > len(
        GROUP_REFERENCE_MARKER
    )
