from __future__ import annotations

import argparse
import sys
from typing import Callable, Dict, List, Optional

from .tools import export_brand, map_palette, validate_document

_COMMANDS: Dict[str, Callable[..., int]] = {
    "map": map_palette.main,
    "export": export_brand.main,
    "validate": validate_document.main,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)

    ap = argparse.ArgumentParser(
        prog="brandbento",
        description="Brand Bento engine tools: palette mapping, token export, document validation.",
    )
    ap.add_argument("command", choices=sorted(_COMMANDS), help="Subcommand")
    ap.add_argument("args", nargs=argparse.REMAINDER, help="Arguments for the subcommand (see <command> --help)")

    if not args:
        ap.print_help(sys.stderr)
        return 2
    if args[0] in ("-h", "--help"):
        ap.print_help()
        return 0

    ns = ap.parse_args(args[:1])
    return _COMMANDS[ns.command](args[1:], prog=f"brandbento {ns.command}")


if __name__ == "__main__":
    raise SystemExit(main())
