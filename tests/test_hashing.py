"""Tests for fragment key derivation."""

import hashlib
import unittest

from doclocale.utils.hashing import derive_key


class TestDeriveKey(unittest.TestCase):
    """Test suite for derive_key."""

    def test_concatenates_without_separator(self) -> None:
        """1. Format: Tokens, text and kind are joined with no separator."""
        assert derive_key(["a"], "b", "c") == "900150983cd24fb0d6963f7d28e17f72"
        assert derive_key(["a", "b"], "", "c") == derive_key(["a"], "b", "c")

    def test_empty_inputs(self) -> None:
        """2. Edge Case: All-empty input hashes the empty string."""
        assert derive_key([], "", "") == "d41d8cd98f00b204e9800998ecf8427e"

    def test_utf8_text(self) -> None:
        """3. Encoding: Non-ASCII text is hashed as UTF-8."""
        expected = hashlib.md5("children/index-0Faire la chose ééclass".encode()).hexdigest()  # noqa: S324
        assert derive_key(["children/", "index-0"], "Faire la chose éé", "class") == expected

    def test_deterministic_and_sensitive(self) -> None:
        """4. Identity: Equal inputs give equal keys, changed text or kind does not."""
        base = derive_key(["children", "index-0"], "Do the thing.", "method")
        assert base == derive_key(["children", "index-0"], "Do the thing.", "method")
        assert base != derive_key(["children", "index-0"], "Do the other thing.", "method")
        assert base != derive_key(["children", "index-0"], "Do the thing.", "function")
        assert base != derive_key(["children", "index-1"], "Do the thing.", "method")
        assert len(base) == 32
