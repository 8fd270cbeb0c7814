from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from huff1.errors import CorruptedData, InvalidFormat

MAGIC = "HUFF1"
SEP = ":"
N_FIELDS = 5


# -------------------
# Container HUFF1 (testo)
# MAGIC : PADDING : TREE_LEN : TREE : PAYLOAD
# -------------------
# I campi numerici sono decimali ASCII. Il payload può contenere ":" e va
# ricomposto: si separano solo i primi quattro delimitatori.
@dataclass(frozen=True)
class Container:
    padding: int
    tree_len: int
    tree: str
    payload: str


def _as_int(v: str, *, where: str) -> int:
    # solo cifre ASCII: int() accetterebbe anche spazi, segni, "_" e cifre unicode
    if not v or not (v.isascii() and v.isdigit()):
        raise CorruptedData(f"{where}: expected a decimal number, got {v!r}")
    return int(v)


def pack_container(padding: int, tree: str, payload: str) -> str:
    if not 0 <= padding <= 7:
        raise ValueError(f"padding out of range: {padding}")
    return SEP.join((MAGIC, str(padding), str(len(tree)), tree, payload))


def unpack_container(blob: str) -> Container:
    parts = blob.split(SEP, N_FIELDS - 1)
    if parts[0] != MAGIC:
        raise InvalidFormat(f"not a {MAGIC} container (tag {parts[0][:16]!r})")
    if len(parts) < N_FIELDS:
        raise CorruptedData(f"container has {len(parts)} field(s), expected {N_FIELDS}")

    _, padding_s, tree_len_s, tree, payload = parts
    padding = _as_int(padding_s, where="padding")
    if padding > 7:
        raise CorruptedData(f"padding out of range: {padding}")
    tree_len = _as_int(tree_len_s, where="tree length")
    if tree_len != len(tree):
        raise CorruptedData(f"tree length mismatch: header={tree_len} actual={len(tree)}")

    return Container(padding=padding, tree_len=tree_len, tree=tree, payload=payload)


def container_header(c: Container) -> dict[str, Any]:
    """Header fields only (no tree/payload), for reports."""
    return {
        "magic": MAGIC,
        "padding": c.padding,
        "tree_len": c.tree_len,
        "payload_bytes": len(c.payload),
    }
