"""Verification helpers.

We implement:
  - text verify: validate a HUFF1 container string
  - file verify: same, reading the container from disk

Policy: light by default (header + tree + padding), --full decodes every symbol.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from huff1.core.bitstream import decode_bits, payload_to_bytes
from huff1.core.tree_codec import deserialize_tree
from huff1.engine.container import container_header, unpack_container
from huff1.errors import CorruptedData
from huff1.files import read_container_file


@dataclass(frozen=True)
class VerifyReport:
    header: dict[str, Any]
    tree_size: int
    payload_bytes: int
    padding: int
    n_symbols: int | None = None  # None in light mode

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


def verify_container_text(blob: str, *, full: bool = False) -> VerifyReport:
    """Validate a container; raise a CorruptPayload subclass on the first problem."""
    if not blob:
        # compress("") == "": an empty container is valid and holds nothing
        return VerifyReport(header={}, tree_size=0, payload_bytes=0, padding=0, n_symbols=0)

    c = unpack_container(blob)
    root = deserialize_tree(c.tree)
    raw = payload_to_bytes(c.payload)
    if not raw and c.padding:
        raise CorruptedData(f"padding {c.padding} with an empty payload")

    n_symbols = None
    if full:
        n_symbols = len(decode_bits(root, c.payload, c.padding))

    return VerifyReport(
        header=container_header(c),
        tree_size=c.tree_len,
        payload_bytes=len(raw),
        padding=c.padding,
        n_symbols=n_symbols,
    )


def verify_container_file(path: Path, *, full: bool = False) -> VerifyReport:
    return verify_container_text(read_container_file(Path(path)), full=full)
