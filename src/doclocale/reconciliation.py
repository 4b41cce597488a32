"""Carry translations from earlier snapshots into a fresh extraction."""

import logging
from dataclasses import replace

from .types import ExtractionResult, Snapshot

logger = logging.getLogger(__name__)


def reconcile(fresh: ExtractionResult, *snapshots: Snapshot) -> ExtractionResult:
    """
    Merge translated values from older snapshots into a fresh extraction.

    Snapshots are applied in the order given, so a later snapshot wins over
    an earlier one. Pass the production snapshot first and the staging
    snapshot second.

    A snapshot entry is carried forward only when its translation is not
    empty, its translation key exists in `fresh`, and its original text is
    identical to the freshly extracted text. Everything else is dropped: the
    fresh fragment keeps its empty translation and the text is flagged for
    retranslation by omission. Snapshots never add fragments.

    Args:
        fresh: The result of the current extraction. Not modified.
        snapshots: Older snapshots in ascending priority.

    Returns:
        A new extraction result with carried-forward translations.

    """
    merged: ExtractionResult = dict(fresh)
    for snapshot in snapshots:
        carried = 0
        for entry in snapshot.values():
            if not entry.translation:
                continue
            current = merged.get(entry.translation_key)
            if current is None or current.original_text != entry.original_text:
                continue
            merged[entry.translation_key] = replace(current, translation=entry.translation)
            carried += 1
        logger.debug("Carried %d of %d snapshot entries forward.", carried, len(snapshot))
    return merged
