"""Processors that extract fragments and check their paths."""

import logging

from doclocale.extraction import extract_fragments
from doclocale.injection_state import REGENERATE_HINT
from doclocale.models import ExecutionContext
from doclocale.resolution import resolve_path

from .base import Processor

__all__ = ["ExtractionProcessor", "PathValidationProcessor"]

logger = logging.getLogger(__name__)


class ExtractionProcessor(Processor):
    """Walks the tree and collects every translatable fragment."""

    def process(self, context: ExecutionContext) -> None:
        """
        Populate `context.fragments`.

        Raises:
            ExtractionError: If any extractor fails. The tree is left untouched.

        """
        if context.project is None:
            msg = "ExtractionProcessor requires a loaded documentation tree."
            raise RuntimeError(msg)
        context.fragments = extract_fragments(context.project)
        context.tree_modified = True
        logger.info("Extracted %d fragments.", len(context.fragments))


class PathValidationProcessor(Processor):
    """Checks that every extracted project path resolves against the rewritten tree."""

    def process(self, context: ExecutionContext) -> None:
        if context.project is None:
            return
        for fragment in context.fragments.values():
            if resolve_path(context.project, fragment.project_path) is None:
                path = tuple(fragment.project_path)
                context.unresolved_paths.append(path)
                logger.warning("Path not found: %s. %s", "/".join(path), REGENERATE_HINT)
        if context.unresolved_paths:
            logger.warning("%d of %d project paths could not be resolved.", len(context.unresolved_paths), len(context.fragments))
        else:
            logger.debug("All %d project paths resolve.", len(context.fragments))
