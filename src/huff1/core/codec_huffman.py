from __future__ import annotations

from dataclasses import dataclass, field

from huff1.core.bitstream import decode_bits, pack_bits
from huff1.core.codec_base import TextCodec
from huff1.core.symbols import build_freq_table, text_to_units, units_to_text
from huff1.core.tree import build_code_table, build_huffman_tree
from huff1.core.tree_codec import deserialize_tree, serialize_tree
from huff1.engine.container import pack_container, unpack_container
from huff1.options import DEFAULT_OPTIONS, CodecOptions


def compress(text: str, options: CodecOptions | None = None) -> str:
    """
    text -> "HUFF1:padding:tree_len:tree:payload"

    Empty text gives "". Never fails for str input.
    """
    if not text:
        return ""
    opts = options or DEFAULT_OPTIONS

    units = text_to_units(text)
    freq = build_freq_table(units)
    root = build_huffman_tree(freq)
    if root is None:
        return ""

    codes = build_code_table(root)
    tree = serialize_tree(root, upper=opts.upper_hex)
    payload, padding = pack_bits(units, codes)
    return pack_container(padding, tree, payload)


def decompress(blob: str) -> str:
    """
    Inverse of compress(). "" gives "".

    Raises InvalidFormat, CorruptedData, MalformedTree or TruncatedStream.
    """
    if not blob:
        return ""
    c = unpack_container(blob)
    root = deserialize_tree(c.tree)
    units = decode_bits(root, c.payload, c.padding)
    return units_to_text(units)


@dataclass
class CodecHuffman(TextCodec):
    codec_id: str = "huff1"
    options: CodecOptions = field(default_factory=CodecOptions)

    def compress(self, text: str) -> str:
        return compress(text, self.options)

    def decompress(self, blob: str) -> str:
        return decompress(blob)
