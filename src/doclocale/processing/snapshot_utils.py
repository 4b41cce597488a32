"""Utilities for reading and writing translation snapshots."""

import json
import logging
import shutil
import tempfile
from pathlib import Path

from pydantic import ValidationError

from doclocale import paths
from doclocale.errors import SnapshotFormatError, SnapshotNotFoundError
from doclocale.types import SNAPSHOT_ADAPTER, ExtractionResult, Snapshot

__all__ = [
    "ensure_staging_readme",
    "load_snapshot",
    "save_snapshot",
    "trim_fragments",
]

logger = logging.getLogger(__name__)


def trim_fragments(result: ExtractionResult) -> Snapshot:
    """Reduce fragments to the fields persisted in a snapshot, keeping their order."""
    return {key: fragment.to_snapshot_entry() for key, fragment in result.items()}


def load_snapshot(path: Path) -> Snapshot:
    """
    Load a snapshot file.

    Raises:
        SnapshotNotFoundError: If the file does not exist.
        SnapshotFormatError: If the file is not valid JSON or an entry does not match the schema.

    """
    if not path.is_file():
        raise SnapshotNotFoundError(path)
    try:
        snapshot = SNAPSHOT_ADAPTER.validate_json(path.read_bytes())
    except ValidationError as e:
        raise SnapshotFormatError(path, str(e)) from e
    logger.debug("Loaded %d snapshot entries from %s", len(snapshot), path)
    return snapshot


def save_snapshot(path: Path, snapshot: Snapshot) -> None:
    """
    Write a snapshot file atomically.

    The content goes to a temporary file in the target directory first and
    is renamed over `path` once complete, so readers never see a partial file.
    """
    paths.ensure_dir_exists(path.parent)
    data = {key: entry.model_dump(by_alias=True) for key, entry in snapshot.items()}
    with tempfile.NamedTemporaryFile("w", encoding="utf-8", dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False) as handle:
        temp_path = Path(handle.name)
        try:
            json.dump(data, handle, ensure_ascii=False, indent=2)
        except Exception:
            handle.close()
            temp_path.unlink(missing_ok=True)
            raise
    temp_path.replace(path)
    logger.info("Wrote %d snapshot entries to %s", len(snapshot), path)


def ensure_staging_readme(staging_dir: Path, prod_dir: Path, default_readme: Path) -> Path | None:
    """
    Seed a staging directory with a README the first time it is populated.

    The production README is preferred, the project's default README is the
    fallback. An existing staging README is never overwritten.

    Returns:
        The path of the staging README, or None if no source was available.

    """
    target = staging_dir / paths.README_FILE_NAME
    if target.exists():
        return target

    prod_readme = prod_dir / paths.README_FILE_NAME
    source = prod_readme if prod_readme.is_file() else default_readme
    if not source.is_file():
        logger.warning("No README found at %s or %s. Staging directory %s has no README.", prod_readme, default_readme, staging_dir)
        return None

    paths.ensure_dir_exists(staging_dir)
    shutil.copyfile(source, target)
    logger.info("Copied %s to %s", source, target)
    return target
