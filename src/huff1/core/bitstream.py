from __future__ import annotations

from typing import Dict, List, Tuple

from huff1.core.tree import Leaf, Node
from huff1.errors import CorruptedData, TruncatedStream


def pack_bits(units: List[int], codes: Dict[int, str]) -> Tuple[str, int]:
    """
    units -> (payload, padding)

    I bit sono MSB-first; l'ultimo byte è completato a destra con zeri.
    padding = numero di bit di riempimento (0..7).
    Il payload porta un carattere U+0000..U+00FF per byte.
    """
    if not units:
        return "", 0

    out_bytes = bytearray()
    current_byte = 0
    bit_count = 0

    for u in units:
        for bit in codes[u]:
            current_byte = (current_byte << 1) | (bit == "1")
            bit_count += 1
            if bit_count == 8:
                out_bytes.append(current_byte)
                current_byte = 0
                bit_count = 0

    padding = 0
    if bit_count > 0:
        padding = 8 - bit_count
        out_bytes.append(current_byte << padding)

    return out_bytes.decode("latin-1"), padding


def payload_to_bytes(payload: str) -> bytes:
    try:
        return payload.encode("latin-1")
    except UnicodeEncodeError as err:
        raise CorruptedData(
            f"payload char {payload[err.start]!r} at {err.start} is not a byte value"
        ) from err


def decode_bits(root: Node, payload: str, padding: int) -> List[int]:
    """
    Decodifica il payload camminando l'albero: 0 -> left, 1 -> right,
    ripartendo dalla radice a ogni foglia.
    """
    bitstream = payload_to_bytes(payload)
    total_bits = len(bitstream) * 8 - padding
    if total_bits < 0:
        raise CorruptedData(f"padding {padding} exceeds payload bits ({len(bitstream) * 8})")

    out: List[int] = []
    node = root
    depth = 0
    seen = 0

    for byte in bitstream:
        for bit_index in range(8):
            if seen == total_bits:
                break
            seen += 1
            bit = (byte >> (7 - bit_index)) & 1
            nxt = node.left if bit == 0 else node.right
            if nxt is None:
                raise CorruptedData(f"bit {seen - 1} leads outside the tree")
            depth += 1
            if isinstance(nxt, Leaf):
                out.append(nxt.symbol)
                node = root
                depth = 0
            else:
                node = nxt

    if depth != 0:
        raise TruncatedStream(f"bitstream ends {depth} bit(s) into a code after {len(out)} symbol(s)")

    return out
