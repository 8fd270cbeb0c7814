from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from huff1.core.symbols import text_to_units
from huff1.engine.container import unpack_container
from huff1.errors import CorruptPayload

SIZE_UNITS = ("Bytes", "KB", "MB", "GB", "TB")


@dataclass(frozen=True)
class CompressionStats:
    original_size: int
    compressed_size: int
    ratio: float
    savings: float
    tree_size: int | None = None

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


def string_size_in_bytes(text: str) -> int:
    """Size of text as UTF-16 (2 bytes per code unit)."""
    return len(text_to_units(text)) * 2


def format_file_size(n_bytes: int, decimals: int = 2) -> str:
    """Human readable size, base 1024: 0 -> "0 Bytes", 1536 -> "1.5 KB"."""
    if n_bytes <= 0:
        return "0 Bytes"
    i = 0
    while i < len(SIZE_UNITS) - 1 and n_bytes >= 1024 ** (i + 1):
        i += 1
    value = round(n_bytes / (1024**i), decimals)
    # "1.50" -> "1.5", "2.00" -> "2"
    s = f"{value:.{decimals}f}".rstrip("0").rstrip(".") if decimals > 0 else str(int(value))
    return f"{s} {SIZE_UNITS[i]}"


def compression_stats(original: str, compressed: str) -> CompressionStats:
    """
    Size/ratio metrics for a finished compression.

    Best effort: never raises. tree_size is reported only when the compressed
    blob parses as a container header.
    """
    original_size = string_size_in_bytes(original)
    compressed_size = len(compressed)
    ratio = compressed_size / original_size if original_size > 0 else 0.0
    savings = 100.0 * (1.0 - ratio) if original_size > 0 else 0.0

    tree_size = None
    if compressed:
        try:
            tree_size = unpack_container(compressed).tree_len
        except CorruptPayload:
            tree_size = None

    return CompressionStats(
        original_size=original_size,
        compressed_size=compressed_size,
        ratio=ratio,
        savings=savings,
        tree_size=tree_size,
    )
