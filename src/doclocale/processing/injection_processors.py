"""Processors that rewrite the tree for publication."""

import logging

from doclocale import paths
from doclocale.errors import SnapshotFormatError, SnapshotNotFoundError
from doclocale.extraction import strip_translation_tags
from doclocale.injection import inject
from doclocale.models import ExecutionContext
from doclocale.paths import SnapshotStage

from .base import Processor
from .snapshot_utils import load_snapshot

__all__ = ["InjectionProcessor", "StripProcessor"]

logger = logging.getLogger(__name__)


class InjectionProcessor(Processor):
    """Applies the staging snapshot to the tree."""

    def process(self, context: ExecutionContext) -> None:
        """
        Inject approved translations into `context.project`.

        The snapshot is loaded before anything touches the tree. If it is
        missing or unreadable, the error is logged and the tree stays as it
        was loaded.
        """
        if context.project is None:
            msg = "InjectionProcessor requires a loaded documentation tree."
            raise RuntimeError(msg)

        snapshot_file = paths.get_snapshot_file(context.project_root, context.config.translations_dir, SnapshotStage.STAGING, context.l10n_code)
        context.snapshot_path = snapshot_file
        try:
            snapshot = load_snapshot(snapshot_file)
        except SnapshotNotFoundError:
            logger.exception("Translation file not found for '%s'. Run in 'generate' mode first.", context.l10n_code)
            return
        except SnapshotFormatError:
            logger.exception("Could not read the translation file for '%s'.", context.l10n_code)
            return

        context.injection_records = inject(context.project, snapshot)
        context.tree_modified = True


class StripProcessor(Processor):
    """Removes the translation tags without injecting anything."""

    def process(self, context: ExecutionContext) -> None:
        if context.project is None:
            msg = "StripProcessor requires a loaded documentation tree."
            raise RuntimeError(msg)
        strip_translation_tags(context.project)
        context.tree_modified = True
        logger.info("Stripped translation tags from the documentation tree.")
