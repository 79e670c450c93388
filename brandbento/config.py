# brandbento/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from brandbento.contrast import MIN_TEXT_CONTRAST
from brandbento.history import MAX_HISTORY
from brandbento.mapping import COMPLEXITY_MODES
from brandbento.util.console import obs_warn

ENV_MAX_HISTORY = "BRANDBENTO_MAX_HISTORY"
ENV_MIN_CONTRAST = "BRANDBENTO_MIN_CONTRAST"
ENV_COMPLEXITY = "BRANDBENTO_COMPLEXITY"

MAX_CONTRAST = 21.0


@dataclass(frozen=True)
class EngineConfig:
    """Store tuning knobs. Defaults match the editor's shipped behavior.

    `min_text_contrast` may only tighten the 4.5:1 text/bg floor.
    """

    max_history: int = MAX_HISTORY
    min_text_contrast: float = MIN_TEXT_CONTRAST
    default_complexity: str = "full"

    def __post_init__(self) -> None:
        if isinstance(self.max_history, bool) or not isinstance(self.max_history, int) or self.max_history < 1:
            raise ValueError(f"max_history must be int >= 1; got {self.max_history!r}")
        if not (MIN_TEXT_CONTRAST <= self.min_text_contrast <= MAX_CONTRAST):
            raise ValueError(
                f"min_text_contrast must be within {MIN_TEXT_CONTRAST}..{MAX_CONTRAST:g}; got {self.min_text_contrast!r}"
            )
        if self.default_complexity not in COMPLEXITY_MODES:
            raise ValueError(f"default_complexity must be one of {'|'.join(COMPLEXITY_MODES)}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EngineConfig":
        """Read overrides from the environment; invalid values keep defaults."""
        env = os.environ if environ is None else environ
        base = cls()

        max_history = base.max_history
        raw = (env.get(ENV_MAX_HISTORY) or "").strip()
        if raw:
            try:
                v = int(raw)
                if v < 1:
                    raise ValueError(raw)
                max_history = v
            except ValueError:
                obs_warn("config", f"ignoring {ENV_MAX_HISTORY}={raw!r}")

        min_contrast = base.min_text_contrast
        raw = (env.get(ENV_MIN_CONTRAST) or "").strip()
        if raw:
            try:
                f = float(raw)
                if not (MIN_TEXT_CONTRAST <= f <= MAX_CONTRAST):
                    raise ValueError(raw)
                min_contrast = f
            except ValueError:
                obs_warn("config", f"ignoring {ENV_MIN_CONTRAST}={raw!r}")

        complexity = base.default_complexity
        raw = (env.get(ENV_COMPLEXITY) or "").strip().lower()
        if raw:
            if raw in COMPLEXITY_MODES:
                complexity = raw
            else:
                obs_warn("config", f"ignoring {ENV_COMPLEXITY}={raw!r}")

        return cls(max_history=max_history, min_text_contrast=min_contrast, default_complexity=complexity)


__all__ = ["EngineConfig", "MAX_CONTRAST"]
