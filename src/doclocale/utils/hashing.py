import hashlib
from collections.abc import Sequence


def derive_key(path_tokens: Sequence[str], text: str, kind: str) -> str:
    """
    Compute the content-addressed identity of a fragment.

    The path tokens, the text and the kind are concatenated without any
    separator and hashed with MD5. The concatenation format is shared with
    existing snapshot files, so it must not change.

    Args:
        path_tokens: The structural or navigable path of the fragment.
        text: The original text of the fragment.
        kind: The kind name of the owning node.

    Returns:
        The hex digest identifying the fragment.

    """
    payload = f"{''.join(path_tokens)}{text}{kind}"
    return hashlib.md5(payload.encode("utf-8")).hexdigest()  # noqa: S324
