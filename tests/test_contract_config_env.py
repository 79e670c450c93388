from __future__ import annotations

import os
import unittest
from unittest import mock

from brandbento.config import EngineConfig
from brandbento.store import BrandStore, UpdateLogo


class TestEngineConfigContract(unittest.TestCase):
    def test_defaults(self) -> None:
        cfg = EngineConfig.from_env({})
        self.assertEqual(cfg, EngineConfig())
        self.assertEqual(cfg.max_history, 50)
        self.assertEqual(cfg.min_text_contrast, 4.5)
        self.assertEqual(cfg.default_complexity, "full")

    def test_valid_overrides(self) -> None:
        cfg = EngineConfig.from_env({
            "BRANDBENTO_MAX_HISTORY": "5",
            "BRANDBENTO_MIN_CONTRAST": "7",
            "BRANDBENTO_COMPLEXITY": " Curated ",
        })
        self.assertEqual(cfg, EngineConfig(max_history=5, min_text_contrast=7.0, default_complexity="curated"))

    def test_invalid_overrides_keep_defaults(self) -> None:
        for env in (
            {"BRANDBENTO_MAX_HISTORY": "0"},
            {"BRANDBENTO_MAX_HISTORY": "many"},
            {"BRANDBENTO_MIN_CONTRAST": "30"},
            {"BRANDBENTO_MIN_CONTRAST": "nan"},
            {"BRANDBENTO_COMPLEXITY": "extreme"},
            {"BRANDBENTO_MAX_HISTORY": "   "},
        ):
            self.assertEqual(EngineConfig.from_env(env), EngineConfig(), env)

    def test_contrast_setting_cannot_go_below_aa(self) -> None:
        for raw in ("1", "2", "4.49"):
            self.assertEqual(EngineConfig.from_env({"BRANDBENTO_MIN_CONTRAST": raw}).min_text_contrast, 4.5, raw)
        with self.assertRaises(ValueError):
            EngineConfig(min_text_contrast=2.0)
        with self.assertRaises(ValueError):
            EngineConfig(max_history=0)
        with self.assertRaises(ValueError):
            EngineConfig(default_complexity="extreme")

    def test_palette_application_keeps_aa_floor(self) -> None:
        from brandbento.color import contrast_ratio
        from brandbento.contrast import enforce_contrast
        from brandbento.model import ColorRoles

        store = BrandStore(config=EngineConfig.from_env({"BRANDBENTO_MIN_CONTRAST": "2"}))
        store.apply_palette(["#AAAAAA", "#555555", "#E63946"])
        colors = store.brand.colors
        self.assertGreaterEqual(contrast_ratio(colors.text, colors.bg), 4.5)

        out = enforce_contrast(ColorRoles(bg="#AAAAAA", text="#555555"), 2.0)
        self.assertGreaterEqual(contrast_ratio(out.text, out.bg), 4.5)

    def test_reads_process_environment_by_default(self) -> None:
        with mock.patch.dict(os.environ, {"BRANDBENTO_MAX_HISTORY": "2"}):
            cfg = EngineConfig.from_env()
        self.assertEqual(cfg.max_history, 2)

    def test_store_honours_config(self) -> None:
        store = BrandStore(config=EngineConfig(max_history=2, default_complexity="simple"))
        for i in range(4):
            store.commit(UpdateLogo({"text": str(i)}))
        self.assertEqual(len(store.history.past), 2)

        store.apply_palette_by_id("fresh-p13")
        self.assertEqual(store.brand.colors.bg, "#FAFAFA")

    def test_obs_warnings_go_to_stderr_when_enabled(self) -> None:
        import io
        from contextlib import redirect_stderr

        buf = io.StringIO()
        with mock.patch.dict(os.environ, {"BRANDBENTO_OBS_LOG": "1"}), redirect_stderr(buf):
            EngineConfig.from_env({"BRANDBENTO_COMPLEXITY": "extreme"})
        self.assertIn("[brandbento.config] WARN:", buf.getvalue())

        buf = io.StringIO()
        with mock.patch.dict(os.environ, {"BRANDBENTO_OBS_LOG": "0"}), redirect_stderr(buf):
            EngineConfig.from_env({"BRANDBENTO_COMPLEXITY": "extreme"})
        self.assertEqual(buf.getvalue(), "")


if __name__ == "__main__":
    unittest.main(verbosity=2)
