"""Defines shared data structures and types for DocLocale."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class SnapshotEntry(BaseModel):
    """
    The persisted form of a fragment.

    Field order and camelCase keys match the snapshot files written by
    earlier versions of the tool, so existing translations stay readable.
    """

    model_config = ConfigDict(populate_by_name=True)

    human_readable_path: str | None = Field(default=None, alias="humanReadablePath")
    kind: str
    original_text: str = Field(alias="originalText")
    translation: str = ""
    project_path: list[str] = Field(alias="projectPath")
    translation_key: str = Field(alias="translationKey")


Snapshot = dict[str, SnapshotEntry]

SNAPSHOT_ADAPTER: TypeAdapter[Snapshot] = TypeAdapter(Snapshot)


@dataclass
class Fragment:
    """
    One unit of translatable text found in the documentation tree.

    Attributes:
        original_text: The source-language text currently in the tree.
        kind: The kind name of the owning node, or 'category' / 'group'.
        flat_path: Node ids, names and type tags. Only used to derive
            `location_identifier`.
        project_path: The navigation route from the project root to the
            field holding `original_text`.
        location_identifier: Hash of flat path, text and kind.
        translation_key: Hash of project path, text and kind. Primary key.
        translation: The localized text. Empty until translated.
        human_readable_path: Breadcrumb for diagnostics. Never used for lookups.

    """

    original_text: str
    kind: str
    flat_path: list[str]
    project_path: list[str]
    location_identifier: str
    translation_key: str
    translation: str = ""
    human_readable_path: str | None = None

    @property
    def is_translated(self) -> bool:
        return self.translation != ""

    def to_snapshot_entry(self) -> SnapshotEntry:
        """Drop the identity-only fields and keep what injection needs."""
        return SnapshotEntry(
            human_readable_path=self.human_readable_path,
            kind=self.kind,
            original_text=self.original_text,
            translation=self.translation,
            project_path=list(self.project_path),
            translation_key=self.translation_key,
        )


ExtractionResult = dict[str, Fragment]
