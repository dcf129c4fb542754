"""Classification verdict models."""
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, computed_field


class Verdict(Enum):
    """Outcome of classifying one license expression."""

    FREE = "free"
    NON_FREE = "non_free"
    MAYBE_NON_FREE = "maybe_non_free"


class Classification(BaseModel):
    """Verdict for one license expression against one reference group."""

    model_config = {"extra": "forbid", "frozen": True}

    verdict: Verdict = Field(description="Classification outcome")
    license: Optional[str] = Field(
        default=None,
        description="License token that triggered a non-free verdict",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_free(self) -> bool:
        """True if the expression is free under the reference group."""
        return self.verdict == Verdict.FREE
