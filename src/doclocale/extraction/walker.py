"""Depth-first traversal that collects fragments from the whole tree."""

import logging
from collections.abc import Iterable, Iterator, Sequence
from contextlib import contextmanager

from doclocale.errors import ExtractionError, ExtractionPhase
from doclocale.reflections import ContainerReflection, DeclarationReflection, ProjectReflection, Reflection
from doclocale.types import ExtractionResult, Fragment

from .extractors import (
    extract_accessor_descriptions,
    extract_categories,
    extract_descriptions,
    extract_groups,
    extract_spliced_summary,
    extract_translation_blocks,
    index_token,
)
from .rewrite import RewritePlan

__all__ = ["extract_fragments", "strip_translation_tags", "walk"]

logger = logging.getLogger(__name__)


@contextmanager
def _extraction_phase(phase: ExtractionPhase, path: Sequence[str]) -> Iterator[None]:
    """Re-raise unexpected failures as an ExtractionError naming the phase."""
    try:
        yield
    except ExtractionError:
        raise
    except Exception as e:
        raise ExtractionError(phase, path, str(e)) from e


def _merge(result: ExtractionResult, fragments: Iterable[Fragment]) -> None:
    for fragment in fragments:
        result[fragment.translation_key] = fragment


def walk(node: Reflection, path: Sequence[str], human_path: Sequence[str], plan: RewritePlan) -> ExtractionResult:
    """
    Collect the fragments of `node` and everything below it.

    Rewrites are recorded on `plan`; the tree itself is left untouched.

    Args:
        node: The node to start from.
        path: The project path of `node`.
        human_path: The breadcrumb of display names leading to `node`.
        plan: Receives the summary splices and tag removals.

    Returns:
        The fragments keyed by translation key. On a key collision the
        fragment found later in document order wins.

    Raises:
        ExtractionError: If any extractor fails.

    """
    result: ExtractionResult = {}
    if node.is_external:
        return result

    if isinstance(node, ContainerReflection):
        if node.categories is not None:
            with _extraction_phase(ExtractionPhase.CATEGORIES, path):
                _merge(result, extract_categories(node, path, human_path))
        if node.groups is not None:
            with _extraction_phase(ExtractionPhase.GROUPS, path):
                _merge(result, extract_groups(node, path, human_path))

    if node.comment is not None:
        with _extraction_phase(ExtractionPhase.COMMENT, path):
            _merge(result, extract_spliced_summary(node, path, human_path))
            _merge(result, extract_descriptions(node, path, human_path, plan))
        with _extraction_phase(ExtractionPhase.BLOCK_COMMENT, path):
            _merge(result, extract_translation_blocks(node, path, human_path, plan))

    if isinstance(node, ContainerReflection) and node.children is not None:
        with _extraction_phase(ExtractionPhase.CHILDREN, path):
            for index, child in enumerate(node.children):
                result.update(walk(child, [*path, "children", index_token(index)], [*human_path, child.name], plan))

    if isinstance(node, DeclarationReflection):
        if node.signatures is not None:
            with _extraction_phase(ExtractionPhase.SIGNATURES, path):
                for index, signature in enumerate(node.signatures):
                    result.update(walk(signature, [*path, "signatures", index_token(index)], [*human_path, signature.name], plan))

        for token, signature in (("getSignature", node.get_signature), ("setSignature", node.set_signature)):
            if signature is None:
                continue
            with _extraction_phase(ExtractionPhase.ACCESSOR, path):
                _merge(result, extract_accessor_descriptions(signature, node, path, human_path, plan))
                result.update(walk(signature, [*path, token], [*human_path, signature.name], plan))

    return result


def extract_fragments(project: ProjectReflection) -> ExtractionResult:
    """
    Extract every fragment of the project and apply the tag rewrites.

    The rewrites are committed only after the whole traversal succeeded, so a
    failed extraction leaves the tree as it was.
    """
    plan = RewritePlan()
    result = walk(project, [], [], plan)
    plan.commit()
    logger.debug("Extracted %d fragments from project '%s'.", len(result), project.name)
    return result


def strip_translation_tags(project: ProjectReflection) -> None:
    """Run the extraction pass for its rewrites only."""
    extract_fragments(project)
