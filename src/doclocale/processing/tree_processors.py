"""Processors that read and write the documentation tree."""

import logging

from doclocale.models import ExecutionContext
from doclocale.reflections import dump_project, load_project

from .base import Processor

__all__ = ["TreeLoadProcessor", "TreeWriteProcessor"]

logger = logging.getLogger(__name__)


class TreeLoadProcessor(Processor):
    """Loads the TypeDoc JSON tree unless the caller supplied one."""

    def process(self, context: ExecutionContext) -> None:
        """
        Populate `context.project`.

        Raises:
            FileNotFoundError: If the TypeDoc JSON file does not exist.
            ValueError: If the file is not a valid TypeDoc project.

        """
        if context.project is not None:
            logger.debug("Using the documentation tree supplied by the caller.")
            return
        source = context.config.project_json_path(context.project_root)
        logger.info("Loading documentation tree from %s", source)
        context.project = load_project(source)


class TreeWriteProcessor(Processor):
    """Writes the rewritten tree to the configured output path."""

    def process(self, context: ExecutionContext) -> None:
        if context.project is None or not context.tree_modified:
            logger.info("Documentation tree unchanged. Nothing to write.")
            return
        dump_project(context.project, context.output_path)
