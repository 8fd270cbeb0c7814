"""Typed errors for HUFF1.

Single source of truth for exit codes lives here.

Policy:
- Errors are small and boring.
- Every decode failure is a named ``CorruptPayload`` subclass; no partial recovery.
- The CLI maps errors to stable exit codes (see EXIT_* constants).
- docs/exit_codes.md is generated from this module (scripts/gen_exit_codes_md.py).
"""

from __future__ import annotations

from dataclasses import dataclass

# -------------------------
# Exit codes (single source)
# -------------------------

EXIT_OK = 0
EXIT_USAGE = 2
EXIT_GENERIC = 10
EXIT_INVALID_FORMAT = 11
EXIT_CORRUPTED_DATA = 12
EXIT_MALFORMED_TREE = 13
EXIT_TRUNCATED_STREAM = 14


@dataclass(frozen=True, slots=True)
class ExitCodeInfo:
    code: int
    name: str
    description: str


EXIT_CODES: tuple[ExitCodeInfo, ...] = (
    ExitCodeInfo(EXIT_OK, "OK", "Success"),
    ExitCodeInfo(EXIT_USAGE, "USAGE", "Usage/config error (invalid args, invalid options JSON, etc.)"),
    ExitCodeInfo(EXIT_GENERIC, "GENERIC", "Generic failure (I/O error, unexpected error, etc.)"),
    ExitCodeInfo(EXIT_INVALID_FORMAT, "INVALID_FORMAT", "Input is not a HUFF1 container (bad tag)"),
    ExitCodeInfo(
        EXIT_CORRUPTED_DATA,
        "CORRUPTED_DATA",
        "Container fields missing or inconsistent (field count, padding, tree length, payload)",
    ),
    ExitCodeInfo(EXIT_MALFORMED_TREE, "MALFORMED_TREE", "Serialized Huffman tree cannot be rebuilt"),
    ExitCodeInfo(EXIT_TRUNCATED_STREAM, "TRUNCATED_STREAM", "Encoded bitstream ends in the middle of a code"),
)

_EXIT_CODE_BY_CODE: dict[int, ExitCodeInfo] = {e.code: e for e in EXIT_CODES}


def exit_code_info(code: int) -> ExitCodeInfo | None:
    return _EXIT_CODE_BY_CODE.get(int(code))


def render_exit_codes_markdown() -> str:
    """Render docs/exit_codes.md content."""
    lines: list[str] = []
    lines.append("# Exit codes\n")
    lines.append("> GENERATED FILE: do not edit manually.\n")
    lines.append("> Source of truth: `src/huff1/errors.py` (EXIT_CODES).\n")
    lines.append("> Regenerate: `python scripts/gen_exit_codes_md.py`.\n\n")
    lines.append("These are the CLI exit codes you can rely on.\n\n")
    lines.append("| Code | Name | Meaning |\n")
    lines.append("|---:|---|---|\n")
    for e in sorted(EXIT_CODES, key=lambda x: x.code):
        lines.append(f"| {e.code} | `{e.name}` | {e.description} |\n")
    lines.append("\n## Notes\n")
    lines.append("- Every internal error extends `Huff1Error` and carries an `exit_code`.\n")
    lines.append("- `--debug` re-raises errors to show full stack traces.\n")
    lines.append(
        "- `--json` on `verify` prints a JSON object to stdout (ok) or stderr (error), and returns the same exit code.\n"
    )
    return "".join(lines)


# ---------------
# Typed exceptions
# ---------------


class Huff1Error(Exception):
    """Base error for HUFF1."""

    exit_code: int = EXIT_GENERIC


class UsageError(Huff1Error):
    exit_code = EXIT_USAGE


class CorruptPayload(Huff1Error):
    """Base for every failure while decoding a container."""

    exit_code = EXIT_GENERIC


class InvalidFormat(CorruptPayload):
    exit_code = EXIT_INVALID_FORMAT


class CorruptedData(CorruptPayload):
    exit_code = EXIT_CORRUPTED_DATA


class MalformedTree(CorruptPayload):
    exit_code = EXIT_MALFORMED_TREE


class TruncatedStream(CorruptPayload):
    exit_code = EXIT_TRUNCATED_STREAM
