from __future__ import annotations

from huff1.errors import (
    EXIT_CODES,
    CorruptedData,
    CorruptPayload,
    Huff1Error,
    InvalidFormat,
    MalformedTree,
    TruncatedStream,
    UsageError,
    exit_code_info,
    render_exit_codes_markdown,
)


def test_exit_codes_are_unique() -> None:
    codes = [e.code for e in EXIT_CODES]
    names = [e.name for e in EXIT_CODES]
    assert len(set(codes)) == len(codes)
    assert len(set(names)) == len(names)


def test_each_error_maps_to_a_documented_code() -> None:
    for cls in (UsageError, CorruptPayload, InvalidFormat, CorruptedData, MalformedTree, TruncatedStream):
        assert issubclass(cls, Huff1Error)
        assert exit_code_info(cls.exit_code) is not None

    decode_errors = (InvalidFormat, CorruptedData, MalformedTree, TruncatedStream)
    assert all(issubclass(c, CorruptPayload) for c in decode_errors)
    assert len({c.exit_code for c in decode_errors}) == 4


def test_markdown_lists_every_code() -> None:
    md = render_exit_codes_markdown()
    for e in EXIT_CODES:
        assert f"| {e.code} | `{e.name}` |" in md
