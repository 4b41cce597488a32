"""Manages the overall DocLocale workflow."""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from .config import DocLocaleConfig
from .models import ExecutionContext, RunMode
from .processing import (
    ExtractionProcessor,
    InjectionProcessor,
    PathValidationProcessor,
    Processor,
    ReconcileProcessor,
    SnapshotWriteProcessor,
    StripProcessor,
    TreeLoadProcessor,
    TreeWriteProcessor,
)
from .reflections import ProjectReflection
from .reporters.summary_reporter import SummaryReporter

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


def build_pipeline(mode: RunMode) -> "Sequence[Processor]":
    """Return the processors that make up one operational mode, in order."""
    if mode == RunMode.INJECT:
        return [TreeLoadProcessor(), InjectionProcessor(), TreeWriteProcessor()]
    if mode == RunMode.STRIP:
        return [TreeLoadProcessor(), StripProcessor(), TreeWriteProcessor()]
    return [
        TreeLoadProcessor(),
        ExtractionProcessor(),
        ReconcileProcessor(),
        SnapshotWriteProcessor(),
        PathValidationProcessor(),
    ]


def run_mode(
    config: DocLocaleConfig,
    project_root: Path,
    *,
    mode: RunMode | None = None,
    project: ProjectReflection | None = None,
    debug: bool = False,
) -> ExecutionContext:
    """
    Run one operational mode by orchestrating its processor pipeline.

    Args:
        config: The application configuration.
        project_root: The root path of the project. Relative config paths resolve against it.
        mode: The mode to run. Defaults to the configured `translation_mode`.
        project: An already loaded documentation tree. Loaded from `config.project_json` if omitted.
        debug: If True, enables debug behaviors.

    Returns:
        The final execution context.

    Raises:
        ExtractionError: If extraction fails. Nothing is written.
        SnapshotFormatError: If a snapshot is corrupt while generating.
        FileNotFoundError: If the TypeDoc JSON file does not exist.
        ValueError: If the TypeDoc JSON file is invalid.

    """
    context = ExecutionContext(
        config=config,
        project_root=project_root,
        mode=mode or RunMode.from_setting(config.translation_mode),
        project=project,
        is_debug=debug,
    )

    logger.info("Running in '%s' mode for language '%s'.", context.mode.value, context.l10n_code)

    for processor in build_pipeline(context.mode):
        logger.debug("Executing processor: %s", processor.__class__.__name__)
        processor.process(context)

    SummaryReporter().generate(context)
    return context
