"""Handles the parsing and validation of the DocLocale configuration file."""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

logger = logging.getLogger(__name__)


class DocLocaleConfig(BaseModel):
    """The root configuration for DocLocale."""

    model_config = ConfigDict(extra="forbid")

    l10n_code: str = "en"
    translation_mode: str = "generate"
    project_json: str = "docs/typedoc.json"
    output_json: str | None = None
    translations_dir: str = "translations"
    readme: str = "README.md"

    @field_validator("l10n_code")
    @classmethod
    def _check_l10n_code(cls, value: str) -> str:
        """The code names a snapshot directory, so it must be a single path component."""
        value = value.strip()
        if not value:
            msg = "l10n_code must not be empty."
            raise ValueError(msg)
        if value in {".", ".."} or "/" in value or "\\" in value:
            msg = f"l10n_code '{value}' must be a single path component."
            raise ValueError(msg)
        return value

    @field_validator("translation_mode")
    @classmethod
    def _normalize_mode(cls, value: str) -> str:
        return value.strip().lower()

    def with_overrides(self, *, l10n_code: str | None = None, translation_mode: str | None = None) -> "DocLocaleConfig":
        """Return a copy with command-line overrides applied and validated."""
        data = self.model_dump()
        if l10n_code is not None:
            data["l10n_code"] = l10n_code
        if translation_mode is not None:
            data["translation_mode"] = translation_mode
        return DocLocaleConfig.model_validate(data)

    def project_json_path(self, project_root: Path) -> Path:
        return project_root / self.project_json

    def output_json_path(self, project_root: Path) -> Path:
        """Where inject and strip write the tree; defaults to '<stem>.<code>.json' next to the input."""
        if self.output_json:
            return project_root / self.output_json
        source = self.project_json_path(project_root)
        return source.with_name(f"{source.stem}.{self.l10n_code}{source.suffix}")

    def readme_path(self, project_root: Path) -> Path:
        return project_root / self.readme


def _raise_type_error(msg: str) -> None:
    """Raise a TypeError with a specific message."""
    raise TypeError(msg)


def load_config(config_path: str) -> DocLocaleConfig:
    """
    Load, parse, and validate the YAML configuration file.

    Args:
        config_path: The path to the main.yaml file.

    Returns:
        A DocLocaleConfig object representing the validated configuration.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If the file is not valid YAML or the configuration is invalid.

    """
    path = Path(config_path)
    if not path.is_file():
        msg = f"Configuration file not found at: {config_path}"
        raise FileNotFoundError(msg)

    try:
        with path.open(encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            _raise_type_error("Config file must be a YAML mapping (dictionary).")

        config = DocLocaleConfig.model_validate(data)
    except (yaml.YAMLError, ValidationError, TypeError) as e:
        msg = f"Invalid or missing configuration: {e}"
        raise ValueError(msg) from e
    else:
        logger.debug("Loaded configuration: %s", config.model_dump_json())
        return config
