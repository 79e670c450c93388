#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from brandbento.config import MAX_CONTRAST, EngineConfig
from brandbento.contrast import MIN_TEXT_CONTRAST, validate_roles
from brandbento.mapping import COMPLEXITY_MODES, resolve_palette
from brandbento.palette_input import parse_palette_input
from brandbento.palettes import get_palette_by_id

PROG = "brandbento-map"


def _die(msg: str, rc: int = 2) -> int:
    print(f"[{PROG}] ERROR: {msg}", file=sys.stderr)
    return rc


def build_parser(prog: str = PROG) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog=prog,
        description=(
            "Map a palette to semantic color roles (bg, text, primary, accent, surfaces).\n"
            "Text/bg contrast is enforced before the complexity level is applied."
        ),
    )
    ap.add_argument("colors", nargs="*", help="Hex colors, e.g. '#112233' 'FFF'")
    ap.add_argument("--text", default=None, help="Pasted palette text (Coolors URL, CSS vars or hex list)")
    ap.add_argument("--palette-id", default=None, help="Palette id from the built-in library")
    ap.add_argument("--complexity", choices=COMPLEXITY_MODES, default=None, help="simple|curated|full")
    ap.add_argument("--min-contrast", type=float, default=None, help="Required text/bg ratio, 4.5..21 (default: 4.5)")
    ap.add_argument("--out", default=None, help="Write JSON here instead of stdout")
    return ap


def _palette_from_args(ns: argparse.Namespace) -> List[Any]:
    if ns.palette_id:
        p = get_palette_by_id(ns.palette_id)
        if p is None:
            raise ValueError(f"unknown palette id: {ns.palette_id}")
        return list(p.colors)
    if ns.text is not None:
        res = parse_palette_input(ns.text)
        if res.error:
            raise ValueError(res.error)
        return list(res.colors)
    if ns.colors:
        return list(ns.colors)
    raise ValueError("Provide colors, --text or --palette-id")


def main(argv: Optional[List[str]] = None, prog: str = PROG) -> int:
    ns = build_parser(prog).parse_args(argv)
    cfg = EngineConfig.from_env()

    try:
        palette = _palette_from_args(ns)
    except ValueError as e:
        return _die(str(e))

    complexity = ns.complexity or cfg.default_complexity
    min_ratio = ns.min_contrast if ns.min_contrast is not None else cfg.min_text_contrast
    if not (MIN_TEXT_CONTRAST <= min_ratio <= MAX_CONTRAST):
        return _die(f"--min-contrast must be within {MIN_TEXT_CONTRAST}..{MAX_CONTRAST:g}; got {min_ratio}")

    roles = resolve_palette(palette, complexity, min_ratio)
    report = validate_roles(roles)
    out: Dict[str, Any] = {
        "colors": roles.to_dict(),
        "complexity": complexity,
        "contrast": {
            "textBg": report.text_bg,
            "primaryBg": report.primary_bg,
            "passesAA": report.passes_aa,
        },
    }
    text = json.dumps(out, indent=2, sort_keys=True, ensure_ascii=False) + "\n"

    if ns.out:
        p = Path(ns.out)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(text, encoding="utf-8", newline="\n")
    else:
        sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
