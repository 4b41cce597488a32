"""
Pydantic models for the TypeDoc JSON reflection tree.

Only the fields DocLocale reads or writes are declared. Every other field of
the TypeDoc output is kept as a model extra, so a project loaded with
`load_project` and written with `dump_project` round-trips unchanged apart
from the translation rewrites.

Node shapes:
    ProjectReflection     -> children, groups, categories
    DeclarationReflection -> children, groups, categories, signatures,
                             getSignature, setSignature
    SignatureReflection   -> leaf for traversal purposes
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import IntEnum
from functools import cache
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError

logger = logging.getLogger(__name__)


class ReflectionKind(IntEnum):
    """TypeDoc `ReflectionKind` bit values."""

    PROJECT = 0x1
    MODULE = 0x2
    NAMESPACE = 0x4
    ENUM = 0x8
    ENUM_MEMBER = 0x10
    VARIABLE = 0x20
    FUNCTION = 0x40
    CLASS = 0x80
    INTERFACE = 0x100
    CONSTRUCTOR = 0x200
    PROPERTY = 0x400
    METHOD = 0x800
    CALL_SIGNATURE = 0x1000
    INDEX_SIGNATURE = 0x2000
    CONSTRUCTOR_SIGNATURE = 0x4000
    PARAMETER = 0x8000
    TYPE_LITERAL = 0x10000
    TYPE_PARAMETER = 0x20000
    ACCESSOR = 0x40000
    GET_SIGNATURE = 0x80000
    SET_SIGNATURE = 0x100000
    TYPE_ALIAS = 0x200000
    REFERENCE = 0x400000
    DOCUMENT = 0x800000


UNKNOWN_KIND: Final[str] = "unknown"

_KIND_NAMES: Final[dict[ReflectionKind, str]] = {
    ReflectionKind.PROJECT: "project",
    ReflectionKind.MODULE: "module",
    ReflectionKind.NAMESPACE: "namespace",
    ReflectionKind.ENUM: "enum",
    ReflectionKind.ENUM_MEMBER: "enumMember",
    ReflectionKind.VARIABLE: "variable",
    ReflectionKind.FUNCTION: "function",
    ReflectionKind.CLASS: "class",
    ReflectionKind.INTERFACE: "interface",
    ReflectionKind.CONSTRUCTOR: "constructor",
    ReflectionKind.PROPERTY: "property",
    ReflectionKind.METHOD: "method",
    ReflectionKind.CALL_SIGNATURE: "callSignature",
    ReflectionKind.INDEX_SIGNATURE: "indexSignature",
    ReflectionKind.CONSTRUCTOR_SIGNATURE: "constructorSignature",
    ReflectionKind.PARAMETER: "parameter",
    ReflectionKind.TYPE_LITERAL: "typeLiteral",
    ReflectionKind.TYPE_PARAMETER: "typeParameter",
    ReflectionKind.ACCESSOR: "accessor",
    ReflectionKind.GET_SIGNATURE: "getSignature",
    ReflectionKind.SET_SIGNATURE: "setSignature",
    ReflectionKind.TYPE_ALIAS: "typeAlias",
    ReflectionKind.REFERENCE: "reference",
}


def kind_name(kind: int | None) -> str:
    """Return the kind name used in fragment keys, or 'unknown'."""
    if kind is None:
        return UNKNOWN_KIND
    try:
        return _KIND_NAMES.get(ReflectionKind(kind), UNKNOWN_KIND)
    except ValueError:
        return UNKNOWN_KIND


class TypeDocModel(BaseModel):
    """Base model: camelCase aliases, unknown fields preserved."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @classmethod
    @cache
    def _token_attributes(cls) -> dict[str, str]:
        mapping: dict[str, str] = {}
        for name, info in cls.model_fields.items():
            mapping[name] = name
            if info.alias:
                mapping[info.alias] = name
        return mapping

    @classmethod
    def attribute_for(cls, token: str) -> str | None:
        """Map a JSON key (alias) or attribute name to the attribute name."""
        return cls._token_attributes().get(token)


@dataclass(frozen=True)
class SplicedOrigin:
    """Where a display part spliced into a summary was extracted from."""

    label: str
    flat_path: tuple[str, ...]
    content_index: int


class CommentDisplayPart(TypeDocModel):
    """A run of comment content: `text`, `code`, `inline-tag`, ..."""

    kind: str
    text: str = ""

    _spliced_origin: SplicedOrigin | None = PrivateAttr(default=None)

    @property
    def spliced_origin(self) -> SplicedOrigin | None:
        return self._spliced_origin

    def mark_spliced(self, origin: SplicedOrigin) -> None:
        self._spliced_origin = origin

    @property
    def is_text(self) -> bool:
        return self.kind == "text"


class CommentTag(TypeDocModel):
    """A block tag such as `@remarks` or `@translationBlock`."""

    tag: str
    content: list[CommentDisplayPart] = Field(default_factory=list)


class Comment(TypeDocModel):
    """A parsed doc comment."""

    summary: list[CommentDisplayPart] = Field(default_factory=list)
    block_tags: list[CommentTag] = Field(default_factory=list, alias="blockTags")

    def get_tags(self, tag: str) -> list[CommentTag]:
        return [block for block in self.block_tags if block.tag == tag]

    def remove_tags(self, tag: str) -> None:
        self.block_tags = [block for block in self.block_tags if block.tag != tag]


class ReflectionFlags(TypeDocModel):
    is_external: bool = Field(default=False, alias="isExternal")


class ReflectionCategory(TypeDocModel):
    title: str


class ReflectionGroup(TypeDocModel):
    title: str


class Reflection(TypeDocModel):
    """Fields shared by every node of the tree."""

    id: int
    name: str = ""
    kind: int | None = None
    variant: str | None = None
    flags: ReflectionFlags = Field(default_factory=ReflectionFlags)
    comment: Comment | None = None

    @property
    def kind_name(self) -> str:
        return kind_name(self.kind)

    @property
    def is_external(self) -> bool:
        return self.flags.is_external


class SignatureReflection(Reflection):
    """Call, construct, index, get and set signatures."""


class ContainerReflection(Reflection):
    """A node that owns children and their group/category labels."""

    children: list[DeclarationReflection] | None = None
    groups: list[ReflectionGroup] | None = None
    categories: list[ReflectionCategory] | None = None


class DeclarationReflection(ContainerReflection):
    """Modules, classes, members, accessors, ..."""

    signatures: list[SignatureReflection] | None = None
    get_signature: SignatureReflection | None = Field(default=None, alias="getSignature")
    set_signature: SignatureReflection | None = Field(default=None, alias="setSignature")


class ProjectReflection(ContainerReflection):
    """The root of the tree."""


ContainerReflection.model_rebuild()
DeclarationReflection.model_rebuild()
ProjectReflection.model_rebuild()


def project_to_dict(project: ProjectReflection) -> dict[str, Any]:
    """Serialize the tree back to TypeDoc JSON keys, omitting unset defaults."""
    return project.model_dump(mode="json", by_alias=True, exclude_unset=True)


def load_project(path: Path) -> ProjectReflection:
    """
    Load a TypeDoc JSON project file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not a valid TypeDoc project.

    """
    if not path.is_file():
        msg = f"TypeDoc project file not found at: {path}"
        raise FileNotFoundError(msg)
    logger.debug("Loading TypeDoc project from %s", path)
    try:
        with path.open("rb") as f:
            data = json.load(f)
        return ProjectReflection.model_validate(data)
    except (json.JSONDecodeError, ValidationError) as e:
        msg = f"Invalid TypeDoc project file {path}: {e}"
        raise ValueError(msg) from e


def dump_project(project: ProjectReflection, path: Path) -> None:
    """Write the tree as TypeDoc JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(project_to_dict(project), f, ensure_ascii=False, indent=2)
    logger.info("Wrote documentation tree to %s", path)
