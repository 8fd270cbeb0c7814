"""HUFF1 CLI.

This is the stable CLI entrypoint (console-script: ``huff1``).

Notes:
  - --version is supported at top-level.
  - verify/stats/bench support --json (machine-readable output).
  - Diagnostics go to stderr prefixed with ``[huff1]``; --debug re-raises.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from huff1.errors import EXIT_GENERIC, EXIT_USAGE, Huff1Error, exit_code_info
from huff1.options import DEFAULT_OPTIONS, CodecOptions, OptionsError, load_options

VERIFY_SCHEMA = "huff1.verify.v1"


def _pkg_version() -> str:
    try:
        from importlib.metadata import PackageNotFoundError, version

        try:
            return version("huff1")
        except PackageNotFoundError:
            # script invoked from source, metadata missing
            return "0+unknown"
    except Exception:
        return "0+unknown"


def _add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--debug", action="store_true", help="Show stack traces on errors")


def _add_options_arg(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--options",
        default=None,
        help="Codec options JSON (huff1.options.v1). Use '@file.json' to load from file, or pass JSON inline.",
    )


def _resolve_options(options_arg: str | None) -> CodecOptions:
    return load_options(options_arg) if options_arg else DEFAULT_OPTIONS


def _print_json(obj: dict[str, Any], *, err: bool = False) -> None:
    print(
        json.dumps(obj, ensure_ascii=False, separators=(",", ":"), sort_keys=True),
        file=sys.stderr if err else sys.stdout,
    )


def _print_verify_json(target: Path, *, full: bool, report: dict[str, Any]) -> None:
    _print_json(
        {
            "schema": VERIFY_SCHEMA,
            "ok": True,
            "target": str(target),
            "full": bool(full),
            "version": _pkg_version(),
            "report": report,
        }
    )


def _print_verify_json_error(target: Path, *, full: bool, err: BaseException, exit_code: int) -> None:
    """Emit stable JSON on stderr for verify errors when --json is used."""
    info = exit_code_info(exit_code)
    _print_json(
        {
            "schema": VERIFY_SCHEMA,
            "ok": False,
            "target": str(target),
            "full": bool(full),
            "version": _pkg_version(),
            "error": {
                "type": type(err).__name__,
                "category": info.name if info else "GENERIC",
                "message": str(err),
                "exit_code": exit_code,
            },
        },
        err=True,
    )


def _cmd_compress(input_path: Path, output_path: Path, options_arg: str | None) -> int:
    from huff1.files import compress_file
    from huff1.stats import format_file_size

    st = compress_file(input_path, output_path, _resolve_options(options_arg))

    print("=== HUFF1 ===")
    print(f"Original   : {input_path} ({format_file_size(st.original_size)})")
    print(f"Compressed : {output_path} ({format_file_size(st.compressed_size)})")
    print(f"Ratio      : {st.ratio:.3f} (1.0 = no compression)")
    print(f"Savings    : {st.savings:.1f}%")
    print("=============")
    return 0


def _cmd_decompress(input_path: Path, output_path: Path, options_arg: str | None) -> int:
    from huff1.files import decompress_file

    decompress_file(input_path, output_path, _resolve_options(options_arg))
    return 0


def _cmd_verify(input_path: Path, *, full: bool, json_out: bool) -> int:
    from huff1.verify import verify_container_file

    try:
        report = verify_container_file(input_path, full=full)
    except Exception as e:
        # For --json we must emit JSON on stderr (stable schema).
        if json_out:
            if isinstance(e, Huff1Error):
                code = int(e.exit_code)
            elif isinstance(e, FileNotFoundError):
                code = EXIT_USAGE
            else:
                code = EXIT_GENERIC
            _print_verify_json_error(input_path, full=full, err=e, exit_code=code)
            return code
        raise

    if json_out:
        _print_verify_json(input_path, full=full, report=report.as_dict())
    else:
        print("OK")
    return 0


def _cmd_stats(original_path: Path, compressed_path: Path, *, json_out: bool, options_arg: str | None) -> int:
    from huff1.files import read_container_file, read_text_file
    from huff1.stats import compression_stats, format_file_size

    opts = _resolve_options(options_arg)
    st = compression_stats(
        read_text_file(original_path, opts.encoding), read_container_file(compressed_path)
    )

    if json_out:
        _print_json(st.as_dict())
        return 0

    print(f"Original size   : {format_file_size(st.original_size)} ({st.original_size} bytes)")
    print(f"Compressed size : {format_file_size(st.compressed_size)} ({st.compressed_size} bytes)")
    print(f"Ratio           : {st.ratio:.3f}")
    print(f"Savings         : {st.savings:.1f}%")
    print(f"Tree size       : {st.tree_size if st.tree_size is not None else '-'}")
    return 0


def _cmd_bench(input_path: Path, *, json_out: bool, options_arg: str | None) -> int:
    from huff1.bench import bench_text
    from huff1.files import read_text_file

    opts = _resolve_options(options_arg)
    rows = bench_text(read_text_file(input_path, opts.encoding))

    if json_out:
        _print_json({"target": str(input_path), "rows": [r.as_dict() for r in rows]})
        return 0

    for r in rows:
        print(f"{r.codec:<6} {r.size:>10}  ratio={r.ratio:.3f}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="huff1", description="HUFF1 Huffman text codec")
    p.add_argument("--version", action="version", version=f"%(prog)s {_pkg_version()}")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_c = sub.add_parser("compress", help="Compress a text file into a HUFF1 container")
    p_c.add_argument("input", type=Path)
    p_c.add_argument("output", type=Path)
    _add_options_arg(p_c)
    _add_common_args(p_c)

    p_d = sub.add_parser("decompress", help="Decompress a HUFF1 container back to text")
    p_d.add_argument("input", type=Path)
    p_d.add_argument("output", type=Path)
    _add_options_arg(p_d)
    _add_common_args(p_d)

    p_v = sub.add_parser("verify", help="Verify a HUFF1 container file")
    p_v.add_argument("input", type=Path)
    p_v.add_argument("--full", action="store_true", help="Decode the whole payload")
    p_v.add_argument("--json", action="store_true", help="Machine-readable output")
    _add_common_args(p_v)

    p_s = sub.add_parser("stats", help="Size/ratio metrics for an original/compressed pair")
    p_s.add_argument("original", type=Path)
    p_s.add_argument("compressed", type=Path)
    p_s.add_argument("--json", action="store_true", help="Machine-readable output")
    _add_options_arg(p_s)
    _add_common_args(p_s)

    p_b = sub.add_parser("bench", help="Compare HUFF1 against zlib/zstd on a text file")
    p_b.add_argument("input", type=Path)
    p_b.add_argument("--json", action="store_true", help="Machine-readable output")
    _add_options_arg(p_b)
    _add_common_args(p_b)

    return p


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    p = build_parser()
    ns = p.parse_args(argv)

    try:
        if ns.cmd == "compress":
            return _cmd_compress(ns.input, ns.output, ns.options)
        if ns.cmd == "decompress":
            return _cmd_decompress(ns.input, ns.output, ns.options)
        if ns.cmd == "verify":
            return _cmd_verify(ns.input, full=bool(ns.full), json_out=bool(ns.json))
        if ns.cmd == "stats":
            return _cmd_stats(ns.original, ns.compressed, json_out=bool(ns.json), options_arg=ns.options)
        if ns.cmd == "bench":
            return _cmd_bench(ns.input, json_out=bool(ns.json), options_arg=ns.options)
        raise AssertionError("unreachable")

    except SystemExit:
        raise
    except OptionsError as e:
        # Treat as usage/config error.
        if getattr(ns, "debug", False):
            raise
        print(f"[huff1] {e}", file=sys.stderr)
        return EXIT_USAGE
    except Huff1Error as e:
        if getattr(ns, "debug", False):
            raise
        print(f"[huff1] {type(e).__name__}: {e}", file=sys.stderr)
        return int(getattr(e, "exit_code", EXIT_GENERIC) or EXIT_GENERIC)
    except Exception as e:
        if getattr(ns, "debug", False):
            raise
        print(f"[huff1] error: {e}", file=sys.stderr)
        return EXIT_GENERIC


if __name__ == "__main__":
    raise SystemExit(main())
