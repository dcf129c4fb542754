"""Base resolver interface."""

from abc import ABC, abstractmethod
from typing import Optional


class BaseResolver(ABC):
    """Abstract base class for license resolvers.

    All license resolvers must inherit from this class and implement
    the resolve() method.
    """

    @abstractmethod
    def resolve(self, category: str, name: str) -> Optional[str]:
        """Resolve the license expression of an installed package.

        Args:
            category: Package category, e.g. ``sys-apps``.
            name: Package directory name including version.

        Returns:
            Raw license expression, or None if it cannot be determined.
        """
