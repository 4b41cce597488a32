"""Write approved translations back into the documentation tree."""

import logging

from .extraction import strip_translation_tags
from .injection_state import REGENERATE_HINT, InjectionRecord, InjectionStatus
from .reflections import ProjectReflection
from .resolution import assign_field, resolve_container, resolve_path
from .types import Snapshot, SnapshotEntry

logger = logging.getLogger(__name__)


def _inject_entry(project: ProjectReflection, entry: SnapshotEntry) -> InjectionRecord:
    path = tuple(entry.project_path)
    container = resolve_container(project, entry.project_path)
    if container is None:
        logger.warning("Path not found: %s. %s", "/".join(path), REGENERATE_HINT)
        return InjectionRecord(entry.translation_key, path, InjectionStatus.PATH_NOT_FOUND)

    current_text = resolve_path(project, entry.project_path)
    if current_text != entry.original_text:
        logger.warning(
            "Stale translation at %s (%s): expected '%s', found '%s'. %s",
            "/".join(path),
            entry.human_readable_path or entry.translation_key,
            entry.original_text,
            current_text,
            REGENERATE_HINT,
        )
        return InjectionRecord(
            entry.translation_key,
            path,
            InjectionStatus.STALE,
            current_text=current_text if isinstance(current_text, str) else None,
        )

    assign_field(container, entry.project_path[-1], entry.translation)
    return InjectionRecord(entry.translation_key, path, InjectionStatus.APPLIED)


def inject(project: ProjectReflection, snapshot: Snapshot) -> list[InjectionRecord]:
    """
    Apply the translations of `snapshot` to `project` in place.

    The translation tags are stripped first, so the tree has the same shape
    as during extraction. An entry is written only if its translation is not
    empty and the tree still holds exactly the recorded original text at the
    recorded path. Other entries are reported and left untouched.

    Args:
        project: The documentation tree, as loaded from TypeDoc.
        snapshot: The approved snapshot.

    Returns:
        One record per snapshot entry that had a translation.

    """
    strip_translation_tags(project)
    records = [_inject_entry(project, entry) for entry in snapshot.values() if entry.translation]
    applied = sum(1 for record in records if record.is_applied)
    logger.debug("Applied %d of %d translated snapshot entries.", applied, len(records))
    return records
