"""Baseline comparison: HUFF1 container vs general purpose byte compressors.

Sizes follow the stats model (original = 2 bytes per UTF-16 unit, container =
1 byte per char). zlib/zstd run on the UTF-8 bytes of the same text, so the
rows answer "how far is HUFF1 from an off-the-shelf compressor".
"""

from __future__ import annotations

import zlib
from dataclasses import asdict, dataclass
from typing import Any

from huff1.core.codec_huffman import compress
from huff1.stats import string_size_in_bytes

try:
    import zstandard as zstd  # type: ignore
except Exception:  # pragma: no cover
    zstd = None


@dataclass(frozen=True)
class BenchRow:
    codec: str
    size: int
    ratio: float

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


def _require_zstd() -> None:
    if zstd is None:
        raise RuntimeError(
            "Module 'zstandard' not available. Install with: python3 -m pip install zstandard"
        )


def zstd_size(data: bytes, level: int = 19) -> int:
    _require_zstd()
    # frame "tight": no content size, no checksum
    c = zstd.ZstdCompressor(level=int(level), write_content_size=False, write_checksum=False)
    return len(c.compress(data))


def bench_text(text: str, *, zstd_level: int = 19) -> list[BenchRow]:
    original_size = string_size_in_bytes(text)
    data = text.encode("utf-8", "surrogatepass")

    sizes = [
        ("huff1", len(compress(text))),
        ("zlib", len(zlib.compress(data, 9))),
        ("zstd", zstd_size(data, zstd_level)),
    ]

    rows: list[BenchRow] = []
    for codec_id, size in sizes:
        ratio = size / original_size if original_size else 0.0
        rows.append(BenchRow(codec=codec_id, size=size, ratio=ratio))
    return rows
