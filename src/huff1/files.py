"""File-level wrappers around compress()/decompress().

Text files are decoded with the configured encoding; containers are always
UTF-8. Both sides use newline="" so no "\\r\\n" translation touches the data.
"""

from __future__ import annotations

from pathlib import Path

from huff1.core.codec_huffman import compress, decompress
from huff1.errors import UsageError
from huff1.options import DEFAULT_OPTIONS, CodecOptions
from huff1.stats import CompressionStats, compression_stats

CONTAINER_ENCODING = "utf-8"


def read_text_file(path: str | Path, encoding: str = "utf-8") -> str:
    try:
        with open(path, "r", encoding=encoding, newline="") as f:
            return f.read()
    except UnicodeDecodeError as err:
        raise UsageError(f"{path}: not valid {encoding} text") from err


def write_text_file(path: str | Path, text: str, encoding: str = "utf-8") -> None:
    with open(path, "w", encoding=encoding, newline="") as f:
        f.write(text)


def read_container_file(path: str | Path) -> str:
    return read_text_file(path, CONTAINER_ENCODING)


def write_container_file(path: str | Path, blob: str) -> None:
    write_text_file(path, blob, CONTAINER_ENCODING)


def compress_file(
    input_path: str | Path, output_path: str | Path, options: CodecOptions | None = None
) -> CompressionStats:
    opts = options or DEFAULT_OPTIONS
    text = read_text_file(input_path, opts.encoding)
    blob = compress(text, opts)
    write_container_file(output_path, blob)
    return compression_stats(text, blob)


def decompress_file(
    input_path: str | Path, output_path: str | Path, options: CodecOptions | None = None
) -> str:
    opts = options or DEFAULT_OPTIONS
    text = decompress(read_container_file(input_path))
    write_text_file(output_path, text, opts.encoding)
    return text
