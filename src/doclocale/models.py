"""Defines the run-time models shared by the processing pipeline."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .config import DocLocaleConfig
from .injection_state import InjectionRecord, InjectionStatus
from .reflections import ProjectReflection
from .types import ExtractionResult

logger = logging.getLogger(__name__)


class RunMode(str, Enum):
    """The operational modes of a run."""

    GENERATE = "generate"
    INJECT = "inject"
    STRIP = "strip"

    @classmethod
    def from_setting(cls, value: str) -> "RunMode":
        """
        Map a configured `translation_mode` to a run mode.

        'default' is an alias of 'strip'. Unrecognized values fall back to
        'generate' with a warning.
        """
        normalized = value.strip().lower()
        if normalized == "default":
            return cls.STRIP
        try:
            return cls(normalized)
        except ValueError:
            logger.warning("Unknown translation mode '%s'. Falling back to '%s'.", value, cls.GENERATE.value)
            return cls.GENERATE


@dataclass
class ExecutionContext:
    """A data class to hold the context for a single execution run."""

    config: DocLocaleConfig
    project_root: Path
    mode: RunMode
    project: ProjectReflection | None = None
    fragments: ExtractionResult = field(default_factory=dict)
    injection_records: list[InjectionRecord] = field(default_factory=list)
    unresolved_paths: list[tuple[str, ...]] = field(default_factory=list)
    snapshot_path: Path | None = None
    tree_modified: bool = False
    is_debug: bool = False

    @property
    def l10n_code(self) -> str:
        return self.config.l10n_code

    @property
    def output_path(self) -> Path:
        return self.config.output_json_path(self.project_root)

    def records_with(self, status: InjectionStatus) -> list[InjectionRecord]:
        return [record for record in self.injection_records if record.status == status]
