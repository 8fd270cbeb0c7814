"""Codec options (v1) for HUFF1.

Goal: make encode settings reproducible and portable (CLI, scripts, CI).

This module intentionally stays *small* and strict:
  - JSON only
  - explicit schema id
  - unknown keys are rejected
"""

from __future__ import annotations

import codecs
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

SPEC_ID_V1 = "huff1.options.v1"

HEX_CASES = ("lower", "upper")


class OptionsError(ValueError):
    pass


def _load_json_arg(options_arg: str) -> dict[str, Any]:
    s = options_arg.strip()
    if not s:
        raise OptionsError("options: empty argument")

    if s.startswith("@"):
        p = Path(s[1:]).expanduser()
        if not p.exists() or not p.is_file():
            raise OptionsError(f"options: file not found: {p}")
        raw = p.read_text(encoding="utf-8")
        try:
            obj = json.loads(raw)
        except Exception as e:
            raise OptionsError(f"options: invalid JSON in {p}: {e}") from e
        if not isinstance(obj, dict):
            raise OptionsError(f"options: JSON in {p} must be an object")
        return obj

    try:
        obj = json.loads(s)
    except Exception as e:
        raise OptionsError(f"options: invalid inline JSON: {e}") from e
    if not isinstance(obj, dict):
        raise OptionsError("options: inline JSON must be an object")
    return obj


def _optional_str(obj: dict[str, Any], key: str, default: str) -> str:
    if key not in obj:
        return default
    v = obj.get(key)
    if not isinstance(v, str) or not v.strip():
        raise OptionsError(f"options: field '{key}' must be a non-empty string")
    return v.strip()


@dataclass(frozen=True)
class CodecOptions:
    """Encode settings. Defaults reproduce the reference container byte for byte."""

    hex_case: str = "lower"
    encoding: str = "utf-8"

    @property
    def upper_hex(self) -> bool:
        return self.hex_case == "upper"


DEFAULT_OPTIONS = CodecOptions()


def load_options(options_arg: str) -> CodecOptions:
    """Load and validate codec options.

    options_arg:
      - '@file.json'
      - inline JSON object
    """
    obj = _load_json_arg(options_arg)

    allowed = {"spec", "hex_case", "encoding"}
    extra = sorted(set(obj.keys()) - allowed)
    if extra:
        raise OptionsError(f"options: unsupported keys: {', '.join(extra)}")

    spec_id = obj.get("spec")
    if spec_id != SPEC_ID_V1:
        raise OptionsError(f"options: unsupported spec: {spec_id!r} (expected {SPEC_ID_V1!r})")

    hex_case = _optional_str(obj, "hex_case", DEFAULT_OPTIONS.hex_case).lower()
    if hex_case not in HEX_CASES:
        raise OptionsError(f"options: hex_case must be one of {', '.join(HEX_CASES)}")

    encoding = _optional_str(obj, "encoding", DEFAULT_OPTIONS.encoding)
    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise OptionsError(f"options: unknown encoding {encoding!r}") from e

    return CodecOptions(hex_case=hex_case, encoding=encoding)
