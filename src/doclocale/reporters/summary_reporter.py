"""A reporter for generating concise execution summaries."""

import logging

from doclocale.injection_state import InjectionStatus
from doclocale.models import ExecutionContext, RunMode

logger = logging.getLogger(__name__)


class SummaryReporter:
    """Generates a concise summary of a run and logs it."""

    def generate(self, context: ExecutionContext) -> None:
        """Log a summary of the execution to the console."""
        logger.info("--- Execution Summary for '%s' (%s) ---", context.l10n_code, context.mode.value)

        if context.mode == RunMode.GENERATE:
            total = len(context.fragments)
            translated = sum(1 for fragment in context.fragments.values() if fragment.is_translated)
            logger.info("Fragments extracted: %d", total)
            logger.info("  - Translated: %d", translated)
            logger.info("  - Untranslated: %d", total - translated)
            logger.info("Unresolved paths: %d", len(context.unresolved_paths))
            if context.snapshot_path is not None:
                logger.info("Snapshot: %s", context.snapshot_path)

        elif context.mode == RunMode.INJECT:
            logger.info("Translated entries considered: %d", len(context.injection_records))
            logger.info("  - Applied: %d", len(context.records_with(InjectionStatus.APPLIED)))
            logger.info("  - Stale: %d", len(context.records_with(InjectionStatus.STALE)))
            logger.info("  - Path not found: %d", len(context.records_with(InjectionStatus.PATH_NOT_FOUND)))

        if context.mode != RunMode.GENERATE:
            written = context.output_path if context.tree_modified else "none"
            logger.info("Output tree: %s", written)

        logger.info("-------------------------------------------------")
