"""License resolvers package."""

from license_auditor.resolvers.base import BaseResolver
from license_auditor.resolvers.vdb import VdbLicenseResolver

__all__ = [
    "BaseResolver",
    "VdbLicenseResolver",
]
