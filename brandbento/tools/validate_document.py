#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from brandbento.persistence import upgrade_document
from brandbento.validate import validate_document

PROG = "brandbento-validate"


def _die(msg: str, rc: int = 2) -> int:
    print(f"[{PROG}] ERROR: {msg}", file=sys.stderr)
    return rc


def build_parser(prog: str = PROG) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog=prog,
        description=(
            "Validate persisted brand documents.\n"
            "Default: validate as-is. With --upgrade, upgrade to the latest schema first."
        ),
    )
    ap.add_argument("paths", nargs="+", help="Document JSON path(s)")
    ap.add_argument("--upgrade", action="store_true", help="Upgrade before validating")
    return ap


def main(argv: Optional[List[str]] = None, prog: str = PROG) -> int:
    ns = build_parser(prog).parse_args(argv)

    all_errs: List[str] = []
    for raw in ns.paths:
        p = Path(raw)
        if not p.exists():
            return _die(f"Missing JSON file: {p}")
        try:
            obj = json.loads(p.read_text(encoding="utf-8", errors="replace"))
            if ns.upgrade:
                obj = upgrade_document(obj)
        except (ValueError, TypeError) as e:
            return _die(f"Failed to load document: {p} ({e})")
        all_errs.extend(f"{p}: {e}" for e in validate_document(obj))

    if all_errs:
        print(f"[{PROG}] FAIL", file=sys.stderr)
        for e in all_errs:
            print(f"  - {e}", file=sys.stderr)
        return 3

    print(f"[{PROG}] OK")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
