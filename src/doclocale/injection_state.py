"""
Outcome tracking for snapshot injection.

Every snapshot entry with a translation ends in exactly one state:

    APPLIED         -> the translation replaced the original text
    STALE           -> the text in the tree no longer matches the snapshot
    PATH_NOT_FOUND  -> the recorded project path no longer resolves

Entries without a translation are not considered at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final


class InjectionStatus(str, Enum):
    """What happened to a translated snapshot entry during injection."""

    APPLIED = "applied"
    """The field now holds the translation."""

    STALE = "stale"
    """The source text changed since the translation was captured."""

    PATH_NOT_FOUND = "path_not_found"
    """The project path does not lead to a field in the current tree."""


REGENERATE_HINT: Final[str] = "The original documentation probably has changed since the translation was generated. Please regenerate the translation file."


@dataclass(frozen=True)
class InjectionRecord:
    """
    The outcome of injecting one snapshot entry.

    Attributes:
        translation_key: Key of the snapshot entry.
        project_path: The path the entry was recorded at.
        status: The outcome.
        current_text: The text found in the tree, for STALE outcomes.

    """

    translation_key: str
    project_path: tuple[str, ...]
    status: InjectionStatus
    current_text: str | None = None

    @property
    def is_applied(self) -> bool:
        return self.status == InjectionStatus.APPLIED

    def __str__(self) -> str:
        """Return a human-readable representation of the outcome."""
        return f"{self.status.value}:{'/'.join(self.project_path)}"
