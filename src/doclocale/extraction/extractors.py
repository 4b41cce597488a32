"""Per-shape extractors that turn node features into fragments."""

import logging
from collections.abc import Sequence
from typing import Final

from doclocale.reflections import (
    CommentDisplayPart,
    ContainerReflection,
    Reflection,
    SignatureReflection,
    SplicedOrigin,
)
from doclocale.types import Fragment
from doclocale.utils.hashing import derive_key

from .rewrite import RewritePlan

__all__ = [
    "ACCESSOR_DESCRIPTION_TAG",
    "DEFAULT_GROUP_TITLES",
    "DESCRIPTION_TAG",
    "HUMAN_PATH_SEPARATOR",
    "TRANSLATION_BLOCK_TAG",
    "build_fragment",
    "extract_accessor_descriptions",
    "extract_categories",
    "extract_descriptions",
    "extract_groups",
    "extract_spliced_summary",
    "extract_translation_blocks",
    "index_token",
]

logger = logging.getLogger(__name__)

DESCRIPTION_TAG: Final[str] = "@description"
ACCESSOR_DESCRIPTION_TAG: Final[str] = "@accessorDescription"
TRANSLATION_BLOCK_TAG: Final[str] = "@translationBlock"

HUMAN_PATH_SEPARATOR: Final[str] = " > "

CATEGORY_KIND: Final[str] = "category"
GROUP_KIND: Final[str] = "group"

# Titles TypeDoc assigns on its own; never translated.
DEFAULT_GROUP_TITLES: Final[frozenset[str]] = frozenset(
    {
        "Constructors",
        "Properties",
        "Methods",
        "Accessors",
        "Namespaces",
        "Classes",
        "Interfaces",
        "Type Aliases",
        "Functions",
    }
)

_DESCRIPTION_LABEL: Final[str] = "translation comments"
_ACCESSOR_LABEL: Final[str] = "accessor comments"
_BLOCK_LABEL: Final[str] = "translation block comments"


def index_token(index: int) -> str:
    """Render an ordinal as a path token."""
    return f"index-{index}"


def build_fragment(
    *,
    text: str,
    kind: str,
    flat_path: list[str],
    project_path: list[str],
    human_path: Sequence[str],
) -> Fragment:
    """Create a fragment with both identities derived from its paths."""
    return Fragment(
        original_text=text,
        kind=kind,
        flat_path=flat_path,
        project_path=project_path,
        location_identifier=derive_key(flat_path, text, kind),
        translation_key=derive_key(project_path, text, kind),
        human_readable_path=HUMAN_PATH_SEPARATOR.join(human_path),
    )


def extract_categories(node: ContainerReflection, path: Sequence[str], human_path: Sequence[str]) -> list[Fragment]:
    """Extract one fragment per category title."""
    fragments: list[Fragment] = []
    for index, category in enumerate(node.categories or []):
        token = index_token(index)
        fragments.append(
            build_fragment(
                text=category.title,
                kind=CATEGORY_KIND,
                flat_path=[str(node.id), "categories", token],
                project_path=[*path, "categories", token, "title"],
                human_path=[*human_path, "categories", token, "title"],
            )
        )
    return fragments


def extract_groups(node: ContainerReflection, path: Sequence[str], human_path: Sequence[str]) -> list[Fragment]:
    """
    Extract one fragment per group title, skipping TypeDoc's default titles.

    The surviving groups are numbered contiguously in their flat path, so a
    skipped default group does not leave a gap. The project path keeps the
    real position in `groups`, since it has to resolve against the tree.
    """
    translatable = [(index, group) for index, group in enumerate(node.groups or []) if group.title not in DEFAULT_GROUP_TITLES]
    fragments: list[Fragment] = []
    for position, (index, group) in enumerate(translatable):
        token = index_token(index)
        fragments.append(
            build_fragment(
                text=group.title,
                kind=GROUP_KIND,
                flat_path=[str(node.id), "groups", index_token(position)],
                project_path=[*path, "groups", token, "title"],
                human_path=[*human_path, "groups", token, "title"],
            )
        )
    return fragments


def _splice_tag_content(
    *,
    source: Reflection,
    owner: Reflection,
    tag: str,
    label: str,
    path: Sequence[str],
    human_path: Sequence[str],
    plan: RewritePlan,
) -> list[Fragment]:
    """
    Move the content of `tag` on `source` into the summary of `owner`.

    Text parts become fragments addressed at their new summary slot. Other
    parts (code spans, inline tags) are moved as-is and never extracted.
    """
    comment = source.comment
    if comment is None:
        return []
    tags = comment.get_tags(tag)
    if not tags:
        return []

    kind = owner.kind_name
    fragments: list[Fragment] = []
    for block in tags:
        for index, part in enumerate(block.content):
            spliced = part.model_copy()
            if not part.is_text:
                plan.append_to_summary(owner, spliced)
                continue
            flat_path = [str(source.id), source.name, "comments", index_token(index)]
            spliced.mark_spliced(SplicedOrigin(label=label, flat_path=tuple(flat_path), content_index=index))
            summary_index = plan.append_to_summary(owner, spliced)
            fragments.append(
                build_fragment(
                    text=part.text,
                    kind=kind,
                    flat_path=flat_path,
                    project_path=[*path, "comment", "summary", index_token(summary_index), "text"],
                    human_path=[*human_path, label, index_token(index), "text"],
                )
            )
    plan.remove_tag(comment, tag)
    logger.debug("Spliced %d %s tag(s) from node %s into node %s.", len(tags), tag, source.id, owner.id)
    return fragments


def extract_descriptions(node: Reflection, path: Sequence[str], human_path: Sequence[str], plan: RewritePlan) -> list[Fragment]:
    """Extract `@description` content and splice it into the node's own summary."""
    return _splice_tag_content(
        source=node,
        owner=node,
        tag=DESCRIPTION_TAG,
        label=_DESCRIPTION_LABEL,
        path=path,
        human_path=human_path,
        plan=plan,
    )


def extract_accessor_descriptions(
    signature: SignatureReflection,
    parent: Reflection,
    path: Sequence[str],
    human_path: Sequence[str],
    plan: RewritePlan,
) -> list[Fragment]:
    """
    Extract `@accessorDescription` content of a get/set signature.

    TypeDoc renders an accessor's description from the accessor itself, not
    from its signatures, so the content is spliced into the parent's summary
    and `path` is the parent's path.
    """
    return _splice_tag_content(
        source=signature,
        owner=parent,
        tag=ACCESSOR_DESCRIPTION_TAG,
        label=_ACCESSOR_LABEL,
        path=path,
        human_path=human_path,
        plan=plan,
    )


def extract_translation_blocks(node: Reflection, path: Sequence[str], human_path: Sequence[str], plan: RewritePlan) -> list[Fragment]:
    """
    Extract the text of `@translationBlock` block tags in place.

    Block indices are counted over the tags that survive the removals already
    scheduled for this comment.
    """
    comment = node.comment
    if comment is None:
        return []
    remaining = [block for block in comment.block_tags if not plan.is_tag_removed(comment, block.tag)]
    kind = node.kind_name
    fragments: list[Fragment] = []
    for block_index, block in enumerate(remaining):
        if block.tag != TRANSLATION_BLOCK_TAG:
            continue
        for index, part in enumerate(block.content):
            if not part.is_text:
                continue
            fragments.append(
                build_fragment(
                    text=part.text,
                    kind=kind,
                    flat_path=[str(node.id), node.name, "comments", index_token(index)],
                    project_path=[*path, "comment", "blockTags", index_token(block_index), "content", index_token(index), "text"],
                    human_path=[*human_path, _BLOCK_LABEL, index_token(index), "text"],
                )
            )
    return fragments


def _spliced_text_parts(summary: list[CommentDisplayPart]) -> list[tuple[int, CommentDisplayPart, SplicedOrigin]]:
    return [(index, part, part.spliced_origin) for index, part in enumerate(summary) if part.is_text and part.spliced_origin is not None]


def extract_spliced_summary(node: Reflection, path: Sequence[str], human_path: Sequence[str]) -> list[Fragment]:
    """
    Re-extract summary parts spliced in by an earlier pass over the same tree.

    The fragments are identical to the ones the splicing pass produced, so
    extracting twice in a row yields the same fragment set.
    """
    if node.comment is None:
        return []
    kind = node.kind_name
    return [
        build_fragment(
            text=part.text,
            kind=kind,
            flat_path=list(origin.flat_path),
            project_path=[*path, "comment", "summary", index_token(index), "text"],
            human_path=[*human_path, origin.label, index_token(origin.content_index), "text"],
        )
        for index, part, origin in _spliced_text_parts(node.comment.summary)
    ]
