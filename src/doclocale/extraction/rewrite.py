"""Deferred tree rewrites recorded while the walker is running."""

import logging
from dataclasses import dataclass, field

from doclocale.reflections import Comment, CommentDisplayPart, Reflection

__all__ = ["RewritePlan"]

logger = logging.getLogger(__name__)


@dataclass
class RewritePlan:
    """
    Summary splices and tag removals, applied in one step after traversal.

    Extractors never touch the tree. They ask the plan where a spliced part
    will land (`next_summary_index`) and which tags are already scheduled for
    removal (`is_tag_removed`), so every path they compute is valid once
    `commit` has run.
    """

    _appends: list[tuple[Reflection, CommentDisplayPart]] = field(default_factory=list)
    _pending_appends: dict[int, int] = field(default_factory=dict)
    _removals: list[tuple[Comment, str]] = field(default_factory=list)
    _removed: set[tuple[int, str]] = field(default_factory=set)

    def next_summary_index(self, owner: Reflection) -> int:
        """Return the summary position the next part spliced into `owner` gets."""
        current = len(owner.comment.summary) if owner.comment is not None else 0
        return current + self._pending_appends.get(id(owner), 0)

    def append_to_summary(self, owner: Reflection, part: CommentDisplayPart) -> int:
        """Schedule `part` to be appended to the summary of `owner` and return its index."""
        index = self.next_summary_index(owner)
        self._appends.append((owner, part))
        self._pending_appends[id(owner)] = self._pending_appends.get(id(owner), 0) + 1
        return index

    def remove_tag(self, comment: Comment, tag: str) -> None:
        key = (id(comment), tag)
        if key in self._removed:
            return
        self._removed.add(key)
        self._removals.append((comment, tag))

    def is_tag_removed(self, comment: Comment, tag: str) -> bool:
        return (id(comment), tag) in self._removed

    @property
    def is_empty(self) -> bool:
        return not self._appends and not self._removals

    def commit(self) -> None:
        """Apply every scheduled rewrite to the tree and reset the plan."""
        logger.debug("Committing %d summary splices and %d tag removals.", len(self._appends), len(self._removals))
        for owner, part in self._appends:
            if owner.comment is None:
                owner.comment = Comment(summary=[])
            # Reassigned so the field counts as set when the tree is dumped.
            owner.comment.summary = [*owner.comment.summary, part]
        for comment, tag in self._removals:
            comment.remove_tags(tag)
        self._appends.clear()
        self._pending_appends.clear()
        self._removals.clear()
        self._removed.clear()
