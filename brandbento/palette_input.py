# brandbento/palette_input.py
"""Parse pasted palette text into a list of `#RRGGBB` colors.

Accepted, in order of precedence:
  1. a Coolors URL           coolors.co/780000-c1121f-fdf0d5
  2. CSS custom properties   --brand-red: #780000;
  3. a hex list              #780000, c1121f fdf0d5   (at least two tokens)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

_COOLORS_RE = re.compile(r"coolors\.co/(?:palette/)?([0-9a-fA-F]{3,8}(?:-[0-9a-fA-F]{3,8})+)")
_CSS_VAR_RE = re.compile(r"--[\w-]+:\s*#([0-9a-fA-F]{3,8})\s*;")
_TOKEN_SPLIT_RE = re.compile(r"[,\s]+")
_HEX_TOKEN_RE = re.compile(r"^[0-9a-fA-F]{3,8}$")
_HEX3_RE = re.compile(r"^#([0-9A-F])([0-9A-F])([0-9A-F])$")
_HEX6_RE = re.compile(r"^#[0-9A-F]{6}$")

EMPTY_INPUT_ERROR = "Paste colors from Coolors or enter hex values"
NO_COLORS_ERROR = "No valid colors found. Try pasting CSS from Coolors or hex values."


@dataclass(frozen=True)
class ParseResult:
    colors: Tuple[str, ...]
    error: Optional[str]


def _normalize(token: str) -> Optional[str]:
    h = ("#" + token[:6]).upper()
    m = _HEX3_RE.match(h)
    if m:
        r, g, b = m.groups()
        return f"#{r}{r}{g}{g}{b}{b}"
    return h if _HEX6_RE.match(h) else None


def _candidates(text: str) -> List[str]:
    m = _COOLORS_RE.search(text)
    if m:
        return m.group(1).split("-")

    css = [m.group(1) for m in _CSS_VAR_RE.finditer(text)]
    if css:
        return css

    tokens = [t.lstrip("#") for t in _TOKEN_SPLIT_RE.split(text) if t]
    hexes = [t for t in tokens if _HEX_TOKEN_RE.match(t)]
    return hexes if len(hexes) >= 2 else []


def parse_palette_input(text: str) -> ParseResult:
    trimmed = (text or "").strip()
    if not trimmed:
        return ParseResult(colors=(), error=EMPTY_INPUT_ERROR)

    out: List[str] = []
    for token in _candidates(trimmed):
        h = _normalize(token)
        if h is not None and h not in out:
            out.append(h)

    if not out:
        return ParseResult(colors=(), error=NO_COLORS_ERROR)
    return ParseResult(colors=tuple(out), error=None)


__all__ = ["ParseResult", "parse_palette_input"]
