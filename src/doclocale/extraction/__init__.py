"""
Fragment extraction.

The walker visits the documentation tree depth first and runs the
per-shape extractors at every node. Extractors record the summary splices
and tag removals they need on a `RewritePlan`, which is committed once the
traversal has finished.
"""

from .extractors import (
    ACCESSOR_DESCRIPTION_TAG,
    DEFAULT_GROUP_TITLES,
    DESCRIPTION_TAG,
    TRANSLATION_BLOCK_TAG,
)
from .rewrite import RewritePlan
from .walker import extract_fragments, strip_translation_tags, walk

__all__ = [
    "ACCESSOR_DESCRIPTION_TAG",
    "DEFAULT_GROUP_TITLES",
    "DESCRIPTION_TAG",
    "TRANSLATION_BLOCK_TAG",
    "RewritePlan",
    "extract_fragments",
    "strip_translation_tags",
    "walk",
]
