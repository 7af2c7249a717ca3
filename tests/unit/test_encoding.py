#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_encoding.py
"""Unit tests for lenient literal decoding."""

import pytest

from md2term.utils.encoding import REPLACEMENT_CHARACTER, decode_literal


@pytest.mark.unit
class TestDecodeLiteral:
    """Tests for decode_literal."""

    def test_valid_text_is_unchanged(self) -> None:
        assert decode_literal("héllo") == "héllo"

    def test_valid_bytes_are_decoded(self) -> None:
        assert decode_literal("héllo".encode("utf-8")) == "héllo"

    def test_bytearray(self) -> None:
        assert decode_literal(bytearray(b"abc")) == "abc"

    def test_invalid_bytes_are_replaced(self) -> None:
        assert decode_literal(b"a\xffb") == f"a{REPLACEMENT_CHARACTER}b"

    def test_truncated_sequence_is_replaced(self) -> None:
        assert decode_literal(b"caf\xc3") == f"caf{REPLACEMENT_CHARACTER}"

    def test_lone_surrogate_is_replaced(self) -> None:
        result = decode_literal("a\ud800b")
        assert result.startswith("a") and result.endswith("b")
        assert "\ud800" not in result
        assert REPLACEMENT_CHARACTER in result
        result.encode("utf-8")

    def test_empty(self) -> None:
        assert decode_literal(b"") == ""
        assert decode_literal("") == ""
