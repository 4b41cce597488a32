"""
Processing pipeline components.

This module provides a set of processor classes for the DocLocale
workflow. Each processor implements a specific stage of the pipeline.
"""

from .base import Processor
from .extraction_processors import ExtractionProcessor, PathValidationProcessor
from .injection_processors import InjectionProcessor, StripProcessor
from .snapshot_processors import ReconcileProcessor, SnapshotWriteProcessor
from .tree_processors import TreeLoadProcessor, TreeWriteProcessor

__all__ = [
    "ExtractionProcessor",
    "InjectionProcessor",
    "PathValidationProcessor",
    "Processor",
    "ReconcileProcessor",
    "SnapshotWriteProcessor",
    "StripProcessor",
    "TreeLoadProcessor",
    "TreeWriteProcessor",
]
