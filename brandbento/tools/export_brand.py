#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from brandbento.export import export_css, export_json
from brandbento.model import Brand
from brandbento.persistence import reconcile_document

PROG = "brandbento-export"


def _die(msg: str, rc: int = 2) -> int:
    print(f"[{PROG}] ERROR: {msg}", file=sys.stderr)
    return rc


def _load_json(p: Path) -> Dict[str, Any]:
    obj = json.loads(p.read_text(encoding="utf-8", errors="replace"))
    if not isinstance(obj, dict):
        raise ValueError(f"input must be a JSON object; got {type(obj).__name__}")
    return obj


def brand_from_input(obj: Dict[str, Any]) -> Brand:
    """Accept a persisted document ({"brand": ...}) or a bare brand object."""
    if isinstance(obj.get("brand"), dict):
        return reconcile_document(obj).brand
    return Brand.from_dict(obj)


def build_parser(prog: str = PROG) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog=prog,
        description="Export a brand as CSS design tokens or JSON.",
    )
    ap.add_argument("--in", dest="in_json", required=True, help="Document or brand JSON path")
    ap.add_argument("--format", choices=("css", "json"), default="css", help="Output format (default: css)")
    ap.add_argument("--out", default=None, help="Write here instead of stdout")
    return ap


def main(argv: Optional[List[str]] = None, prog: str = PROG) -> int:
    ns = build_parser(prog).parse_args(argv)

    p = Path(ns.in_json)
    if not p.exists():
        return _die(f"Missing JSON file: {p}")
    try:
        brand = brand_from_input(_load_json(p))
    except ValueError as e:
        return _die(f"Failed to load brand: {p} ({e})")

    text = export_css(brand) if ns.format == "css" else export_json(brand)
    text += "\n"

    if ns.out:
        outp = Path(ns.out)
        outp.parent.mkdir(parents=True, exist_ok=True)
        outp.write_text(text, encoding="utf-8", newline="\n")
    else:
        sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
