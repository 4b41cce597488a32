"""Processors that reconcile with and persist translation snapshots."""

import logging
from pathlib import Path

from doclocale import paths
from doclocale.models import ExecutionContext
from doclocale.paths import SnapshotStage
from doclocale.reconciliation import reconcile
from doclocale.types import Snapshot

from .base import Processor
from .snapshot_utils import ensure_staging_readme, load_snapshot, save_snapshot, trim_fragments

__all__ = ["ReconcileProcessor", "SnapshotWriteProcessor"]

logger = logging.getLogger(__name__)


def _stage_file(context: ExecutionContext, stage: SnapshotStage) -> Path:
    return paths.get_snapshot_file(context.project_root, context.config.translations_dir, stage, context.l10n_code)


class ReconcileProcessor(Processor):
    """Carries existing translations from the prod and staging snapshots forward."""

    def process(self, context: ExecutionContext) -> None:
        """
        Reconcile `context.fragments` with the snapshots on disk.

        Missing snapshots are skipped. A corrupt snapshot raises
        SnapshotFormatError so that staging is never overwritten with blank
        translations.
        """
        snapshots: list[Snapshot] = []
        for stage in (SnapshotStage.PROD, SnapshotStage.STAGING):
            snapshot_file = _stage_file(context, stage)
            if not snapshot_file.is_file():
                logger.debug("No %s snapshot at %s", stage.value, snapshot_file)
                continue
            snapshots.append(load_snapshot(snapshot_file))

        context.fragments = reconcile(context.fragments, *snapshots)
        translated = sum(1 for fragment in context.fragments.values() if fragment.is_translated)
        logger.info("Reconciled %d fragments with %d snapshot(s): %d already translated.", len(context.fragments), len(snapshots), translated)


class SnapshotWriteProcessor(Processor):
    """Writes the staging snapshot and seeds its README."""

    def process(self, context: ExecutionContext) -> None:
        staging_file = _stage_file(context, SnapshotStage.STAGING)
        context.snapshot_path = staging_file
        save_snapshot(staging_file, trim_fragments(context.fragments))

        prod_dir = paths.get_snapshot_dir(context.project_root, context.config.translations_dir, SnapshotStage.PROD, context.l10n_code)
        ensure_staging_readme(staging_file.parent, prod_dir, context.config.readme_path(context.project_root))
