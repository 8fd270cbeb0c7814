from __future__ import annotations

import ast
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

# Orchestrator modules (CLI, verification, benchmarks).
# LOW-level code (core/engine/options/stats/files) must NEVER import these.
ORCH_PREFIXES: tuple[str, ...] = (
    "huff1.cli",
    "huff1.verify",
    "huff1.bench",
)

# The codec engine is a pure str -> str transform: no I/O, no process state.
PURE_PREFIXES: tuple[str, ...] = ("huff1.core", "huff1.engine")
IMPURE_STDLIB: frozenset[str] = frozenset(
    {"os", "sys", "io", "pathlib", "subprocess", "shutil", "tempfile", "threading", "logging"}
)

PACKAGE_ROOT = "huff1"
SRC_DIR = Path(__file__).resolve().parents[1] / "src"


@dataclass(frozen=True)
class ImportEdge:
    src: str
    dst: str
    file: Path
    lineno: int


def _has_prefix(mod: str, prefixes: tuple[str, ...]) -> bool:
    return any(mod == p or mod.startswith(p + ".") for p in prefixes)


def _module_name(py_file: Path) -> str:
    parts = list(py_file.relative_to(SRC_DIR).with_suffix("").parts)
    if parts[-1] == "__init__":
        parts = parts[:-1]
    return ".".join(parts)


def _resolve_relative(current_mod: str, level: int, module: str | None) -> str:
    base = current_mod.split(".")[:-level]
    return ".".join(base + (module.split(".") if module else []))


def _iter_import_edges() -> Iterable[ImportEdge]:
    for py in sorted((SRC_DIR / PACKAGE_ROOT).rglob("*.py")):
        mod = _module_name(py)
        tree = ast.parse(py.read_text(encoding="utf-8"), filename=str(py))
        for node in ast.walk(tree):
            if isinstance(node, ast.Import):
                for alias in node.names:
                    yield ImportEdge(mod, alias.name, py, node.lineno)
            elif isinstance(node, ast.ImportFrom):
                dst = (
                    _resolve_relative(mod, node.level, node.module)
                    if node.level
                    else (node.module or "")
                )
                yield ImportEdge(mod, dst, py, node.lineno)


def _fail(title: str, edges: list[ImportEdge], fix: str) -> None:
    lines = [title]
    for e in sorted(edges, key=lambda e: (str(e.file), e.lineno)):
        lines.append(f"  {e.file}:{e.lineno}  {e.src}  ->  {e.dst}")
    lines.append("")
    lines.append(fix)
    raise AssertionError("\n".join(lines))


def test_no_low_level_imports_orchestrator() -> None:
    """
    Hard dependency direction:
      ORCH -> may depend on LOW
      LOW  -> must NOT depend on ORCH
    """
    violations = [
        e
        for e in _iter_import_edges()
        if _has_prefix(e.dst, (PACKAGE_ROOT,))
        and not _has_prefix(e.src, ORCH_PREFIXES)
        and _has_prefix(e.dst, ORCH_PREFIXES)
    ]
    if violations:
        _fail(
            "Forbidden imports detected (LOW -> ORCH):",
            violations,
            "Fix: move high-level logic out of LOW modules, or invert the dependency.",
        )


def test_engine_modules_do_no_io() -> None:
    violations = [
        e
        for e in _iter_import_edges()
        if _has_prefix(e.src, PURE_PREFIXES) and e.dst.split(".")[0] in IMPURE_STDLIB
    ]
    if violations:
        _fail(
            "I/O or process-level imports inside the codec engine:",
            violations,
            "Fix: keep file and console handling in huff1.files / huff1.cli.",
        )
