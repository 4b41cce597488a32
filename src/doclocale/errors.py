"""Error definitions for DocLocale."""

from collections.abc import Sequence
from enum import Enum
from pathlib import Path


class ExtractionPhase(str, Enum):
    """The extraction step that was running when a traversal failed."""

    CATEGORIES = "categories"
    GROUPS = "groups"
    COMMENT = "comment"
    BLOCK_COMMENT = "block-comment"
    CHILDREN = "children"
    SIGNATURES = "signatures"
    ACCESSOR = "accessor"


class DocLocaleError(Exception):
    """Base exception for all custom errors."""


class ExtractionError(DocLocaleError):
    """Raised when an extractor fails. Aborts the whole run."""

    def __init__(self, phase: ExtractionPhase, path: Sequence[str], detail: str = "") -> None:
        self.phase = phase
        self.path = list(path)
        location = "/".join(self.path) or "<root>"
        message = f"Error parsing {phase.value} at {location}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class SnapshotNotFoundError(DocLocaleError, FileNotFoundError):
    """Raised when a snapshot file required by the current mode is missing."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Translation file not found: {path}")


class SnapshotFormatError(DocLocaleError, ValueError):
    """Raised when a snapshot file cannot be parsed."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        super().__init__(f"Translation file {path} is corrupted or has invalid data: {detail}")
