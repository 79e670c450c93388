# brandbento/util/console.py
from __future__ import annotations

import os
import sys
from typing import Any

_OBS_ENV = "BRANDBENTO_OBS_LOG"


def eprint(*args: Any) -> None:
    print(*args, file=sys.stderr)


def obs_enabled() -> bool:
    v = (os.getenv(_OBS_ENV, "") or "").strip().lower()
    return v in {"1", "true", "yes", "on"}


def obs_warn(component: str, msg: str) -> None:
    """Emit a WARN line for `component` when BRANDBENTO_OBS_LOG is on."""
    if obs_enabled():
        eprint(f"[brandbento.{component}] WARN: {msg}")
