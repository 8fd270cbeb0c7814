from __future__ import annotations

import pytest

from huff1.core.bitstream import decode_bits, pack_bits, payload_to_bytes
from huff1.core.symbols import build_freq_table, text_to_units
from huff1.core.tree import build_code_table, build_huffman_tree
from huff1.core.tree_codec import deserialize_tree
from huff1.errors import CorruptedData, TruncatedStream


def _encode(text: str):
    units = text_to_units(text)
    root = build_huffman_tree(build_freq_table(units))
    codes = build_code_table(root)
    payload, padding = pack_bits(units, codes)
    bit_len = sum(len(codes[u]) for u in units)
    return root, payload, padding, bit_len


def test_pack_abracadabra() -> None:
    _, payload, padding, bit_len = _encode("abracadabra")
    assert bit_len == 23
    assert padding == 1
    assert payload == "\x6e\x8a\xdc"


def test_pack_empty() -> None:
    assert pack_bits([], {}) == ("", 0)


@pytest.mark.parametrize(
    "text",
    ["x", "aaaaaaaa", "ab", "abracadabra", "the quick brown fox", "a:b::c:::", "é€😀" * 7],
)
def test_padding_accounting(text: str) -> None:
    root, payload, padding, bit_len = _encode(text)
    assert 0 <= padding <= 7
    assert (bit_len + padding) % 8 == 0
    assert len(payload) * 8 == bit_len + padding
    assert all(ord(c) <= 0xFF for c in payload)
    assert decode_bits(root, payload, padding) == text_to_units(text)


def test_single_repeated_char_packs_whole_bytes() -> None:
    _, payload, padding, _ = _encode("a" * 16)
    assert payload == "\x00\x00"
    assert padding == 0


def test_truncated_stream() -> None:
    root = deserialize_tree("01006100100631006401006210072")
    # 21 bits: the last "r" (111) loses its final bit
    with pytest.raises(TruncatedStream):
        decode_bits(root, "\x6e\x8a\xdc", 3)


def test_padding_larger_than_payload() -> None:
    root = deserialize_tree("010061100062")
    with pytest.raises(CorruptedData):
        decode_bits(root, "", 4)


def test_bit_outside_lone_symbol_tree() -> None:
    root = deserialize_tree("010078")
    with pytest.raises(CorruptedData):
        decode_bits(root, "\x80", 7)


def test_payload_char_above_byte_range() -> None:
    with pytest.raises(CorruptedData):
        payload_to_bytes("abĀ")
