"""Manages the discovery and provision of fixed paths for the DocLocale application."""
# src/doclocale/paths.py

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Final

CONFIG_FILE_NAMES: Final[list[str]] = ["main.yaml", "main.yml"]
DOCLOCALE_SUBDIR: Final[Path] = Path(".doclocale")
SNAPSHOT_FILE_NAME: Final[str] = "translation.json"
README_FILE_NAME: Final[str] = "README.md"


class SnapshotStage(str, Enum):
    """The two snapshot locations kept per target language."""

    PROD = "prod"
    STAGING = "staging"


@lru_cache(maxsize=1)
def find_project_root(start_path: Path | None = None) -> Path:
    """
    Find the project root by searching upwards from the start_path (or CWD) for the '.doclocale' anchor.

    The directory containing the '.doclocale' directory is considered the project root.

    Args:
        start_path: The path to start searching from. Defaults to CWD.

    Raises:
        FileNotFoundError: If the anchor config file is not found in any parent directory.

    """
    current_dir = (start_path or Path.cwd()).resolve()
    for parent in [current_dir, *current_dir.parents]:
        config_dir = parent / DOCLOCALE_SUBDIR / "configs"
        if config_dir.is_dir():
            for config_file in CONFIG_FILE_NAMES:
                if (config_dir / config_file).is_file():
                    return parent

    msg = f"Could not find a configuration file ({' or '.join(CONFIG_FILE_NAMES)}) in a '{DOCLOCALE_SUBDIR / 'configs'}' directory from the current location upwards. Please run doclocale from within a configured project or run 'doclocale init' first."
    raise FileNotFoundError(msg)


def get_config_file_path(root_path: Path | None = None) -> Path:
    """Find and return the full path to the main.yaml or main.yml config file."""
    root = find_project_root(root_path)
    config_dir = root / DOCLOCALE_SUBDIR / "configs"
    for config_file in CONFIG_FILE_NAMES:
        path = config_dir / config_file
        if path.is_file():
            return path
    # This part should be unreachable if find_project_root() succeeds.
    msg = "Configuration file disappeared after being found."
    raise FileNotFoundError(msg)


def get_log_dir(root_path: Path | None = None) -> Path:
    """Return the path to the log directory."""
    return find_project_root(root_path) / DOCLOCALE_SUBDIR / "logs"


def get_snapshot_dir(project_root: Path, translations_dir: str, stage: SnapshotStage, l10n_code: str) -> Path:
    """Return the directory holding one stage of the snapshot for a target language."""
    return project_root / translations_dir / stage.value / l10n_code


def get_snapshot_file(project_root: Path, translations_dir: str, stage: SnapshotStage, l10n_code: str) -> Path:
    """Return the path of the snapshot JSON file for a stage and target language."""
    return get_snapshot_dir(project_root, translations_dir, stage, l10n_code) / SNAPSHOT_FILE_NAME


def ensure_dir_exists(path: Path) -> None:
    """Ensure a directory exists, creating it if necessary."""
    path.mkdir(parents=True, exist_ok=True)
