#!/usr/bin/env python3
"""Robust general smoke tests for HUFF1.

Goal:
- deterministic, repeatable tests that exercise the file workflow through the CLI
- produce a JSON report
- fail fast (non-zero exit) on any mismatch

Adds:
- --unicode to include non-BMP characters (surrogate pairs) and very long lines

Usage examples:
  python tools/smoke_general.py --iters 10
  python tools/smoke_general.py --iters 50 --seed 123 --keep
  python tools/smoke_general.py --iters 10 --unicode
"""

from __future__ import annotations

import argparse
import hashlib
import json
import random
import shutil
import string
import subprocess
import sys
import tempfile
from dataclasses import asdict, dataclass
from pathlib import Path


def _run(pyexe: str, *args: str) -> subprocess.CompletedProcess[str]:
    cmd = [pyexe, "-c", "from huff1.cli import main; raise SystemExit(main())", *args]
    return subprocess.run(cmd, text=True, capture_output=True)


def _sha256_file(p: Path) -> str:
    return hashlib.sha256(p.read_bytes()).hexdigest()


def _rand_ascii(rng: random.Random, n: int) -> str:
    # ":" on purpose: it is the container delimiter
    alphabet = string.ascii_letters + string.digits + " _-.,;:/@\r\n\t"
    return "".join(rng.choice(alphabet) for _ in range(n))


def _gen_log_like(rng: random.Random) -> str:
    lines: list[str] = []
    for _ in range(rng.randint(3, 40)):
        hh, mm, ss = rng.randint(0, 23), rng.randint(0, 59), rng.randint(0, 59)
        level = rng.choice(["INFO", "INFO", "INFO", "WARN", "ERROR", "DEBUG"])
        user = rng.randint(1, 500)
        lines.append(f"{hh:02d}:{mm:02d}:{ss:02d} {level} user={user} msg=ok")
    return "\n".join(lines) + "\n"


def _gen_unicode_text(rng: random.Random, *, long_len: int) -> str:
    tokens = ["caffè", "☕", "—", "北京", "東京", "😀", "𝄞", "résumé", "naïve", "€", "\u0000"]
    header = " ".join(rng.choice(tokens) for _ in range(20))
    long_line = ("ΑβΓδ" * (long_len // 4 + 1))[:long_len]
    return f"{header}\n{long_line}\n"


def _gen_text(rng: random.Random, *, unicode_mode: bool) -> str:
    kind = rng.random()
    if kind < 0.1:
        return rng.choice(["", "x", "a" * rng.randint(1, 3000)])
    blocks: list[str] = []
    for _ in range(rng.randint(1, 5)):
        if unicode_mode and rng.random() < 0.35:
            blocks.append(_gen_unicode_text(rng, long_len=rng.randint(100, 20000)))
        elif rng.random() < 0.5:
            blocks.append(_gen_log_like(rng))
        else:
            blocks.append(_rand_ascii(rng, rng.randint(1, 400)))
    return "".join(blocks)


@dataclass
class StepResult:
    iteration: int
    name: str
    ok: bool
    rc: int
    stderr: str


def main() -> int:
    ap = argparse.ArgumentParser(description="HUFF1 robust general smoke tests (CLI file workflow)")
    ap.add_argument("--iters", type=int, default=10, help="Number of iterations (default: 10)")
    ap.add_argument("--seed", type=int, default=12345, help="Deterministic RNG seed (default: 12345)")
    ap.add_argument("--unicode", action="store_true", help="Include non-BMP characters and long lines")
    ap.add_argument("--keep", action="store_true", help="Keep temp workdir on exit")
    ap.add_argument("--json-out", type=Path, default=None, help="Write JSON report to file")
    ap.add_argument("--python", dest="pyexe", default=sys.executable, help="Python executable to use")
    ns = ap.parse_args()

    rng = random.Random(ns.seed)
    wd = Path(tempfile.mkdtemp(prefix="huff1-smoke-"))
    results: list[StepResult] = []
    failed = False

    try:
        for it in range(ns.iters):
            src = wd / f"in_{it:03d}.txt"
            comp = wd / f"in_{it:03d}.huff1"
            back = wd / f"back_{it:03d}.txt"
            with open(src, "w", encoding="utf-8", newline="") as f:
                f.write(_gen_text(rng, unicode_mode=ns.unicode))

            steps = [
                ("compress", ("compress", str(src), str(comp))),
                ("verify", ("verify", str(comp), "--full")),
                ("decompress", ("decompress", str(comp), str(back))),
            ]
            for name, args in steps:
                r = _run(ns.pyexe, *args)
                results.append(StepResult(it, name, r.returncode == 0, r.returncode, r.stderr.strip()))
                if r.returncode != 0:
                    failed = True
                    break
            else:
                same = _sha256_file(src) == _sha256_file(back)
                results.append(StepResult(it, "roundtrip", same, 0 if same else 1, ""))
                failed = failed or not same

            if failed:
                break
    finally:
        if ns.keep:
            print(f"[huff1] workdir kept: {wd}", file=sys.stderr)
        else:
            shutil.rmtree(wd, ignore_errors=True)

    report = {
        "seed": ns.seed,
        "iters": ns.iters,
        "unicode": bool(ns.unicode),
        "ok": not failed,
        "steps": [asdict(r) for r in results],
    }
    text = json.dumps(report, ensure_ascii=False, indent=2)
    if ns.json_out:
        ns.json_out.write_text(text + "\n", encoding="utf-8")
    print(text)
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
