"""
Resolve project paths against the live documentation tree.

A project path is a list of tokens such as
`["children", "index-2", "comment", "summary", "index-0", "text"]`.
`index-N` tokens select a list element. Any other token names a model field
(by its JSON key or attribute name), a preserved unknown field, or a mapping
key.
"""

import logging
from collections.abc import Sequence
from typing import Any, Final

import regex

from doclocale.reflections import TypeDocModel

__all__ = ["INDEX_TOKEN_PATTERN", "assign_field", "resolve_container", "resolve_path"]

logger = logging.getLogger(__name__)

INDEX_TOKEN_PATTERN: Final = regex.compile(r"^index-(\d+)$")

_MISSING: Final = object()


def _read_token(obj: Any, token: str) -> Any:  # noqa: ANN401
    match = INDEX_TOKEN_PATTERN.match(token)
    if match:
        index = int(match.group(1))
        if isinstance(obj, list) and index < len(obj):
            return obj[index]
        return _MISSING

    if isinstance(obj, TypeDocModel):
        attribute = obj.attribute_for(token)
        if attribute is not None:
            value = getattr(obj, attribute)
            return _MISSING if value is None else value
        extra = obj.model_extra or {}
        return extra.get(token, _MISSING)
    if isinstance(obj, dict):
        return obj.get(token, _MISSING)
    return _MISSING


def _walk_tokens(root: Any, tokens: Sequence[str]) -> Any:  # noqa: ANN401
    obj = root
    for token in tokens:
        obj = _read_token(obj, token)
        if obj is _MISSING:
            return _MISSING
    return obj


def resolve_path(root: Any, path: Sequence[str]) -> Any | None:  # noqa: ANN401
    """
    Follow every token of `path` from `root`.

    Returns:
        The value at the end of the path, or None if any step is missing.

    """
    value = _walk_tokens(root, path)
    if value is _MISSING:
        logger.debug("Path not found: %s", list(path))
        return None
    return value


def resolve_container(root: Any, path: Sequence[str]) -> Any | None:  # noqa: ANN401
    """
    Follow all but the last token of `path`.

    The last token names the field to write on the returned container, see
    `assign_field`.

    Returns:
        The container holding the field, or None if it cannot be reached.

    """
    if not path:
        return None
    return resolve_path(root, path[:-1])


def assign_field(container: Any, token: str, value: Any) -> None:  # noqa: ANN401
    """
    Set the field named `token` on `container`.

    Raises:
        KeyError: If `container` has no field named `token`.

    """
    if isinstance(container, TypeDocModel):
        attribute = container.attribute_for(token)
        if attribute is not None:
            setattr(container, attribute, value)
            return
        if container.model_extra is not None and token in container.model_extra:
            container.model_extra[token] = value
            return
    elif isinstance(container, dict) and token in container:
        container[token] = value
        return
    msg = f"Cannot assign field '{token}' on {type(container).__name__}"
    raise KeyError(msg)
