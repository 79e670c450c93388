from __future__ import annotations

import json
import os
import subprocess
import sys
import tempfile
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
FIXTURES = Path(__file__).resolve().parent / "fixtures"


class _ToolCase(unittest.TestCase):
    def _run(self, *args: str) -> subprocess.CompletedProcess:
        env = os.environ.copy()
        env["PYTHONPATH"] = str(REPO_ROOT)
        env.pop("BRANDBENTO_OBS_LOG", None)
        return subprocess.run(
            [sys.executable, "-m", *args],
            cwd=str(REPO_ROOT),
            env=env,
            text=True,
            capture_output=True,
        )


class TestMapPaletteToolContract(_ToolCase):
    def test_maps_positional_colors(self) -> None:
        p = self._run("brandbento.tools.map_palette", "#FFFFFF", "#000000")
        self.assertEqual(p.returncode, 0, p.stderr)
        out = json.loads(p.stdout)
        self.assertEqual(out["colors"]["bg"], "#FFFFFF")
        self.assertEqual(out["colors"]["text"], "#000000")
        self.assertEqual(out["contrast"]["textBg"], 21.0)
        self.assertTrue(out["contrast"]["passesAA"])
        self.assertEqual(out["complexity"], "full")

    def test_palette_id_and_complexity(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            out_json = Path(td) / "roles.json"
            p = self._run(
                "brandbento.tools.map_palette",
                "--palette-id", "bold-p50",
                "--complexity", "curated",
                "--out", str(out_json),
            )
            self.assertEqual(p.returncode, 0, p.stderr)
            self.assertEqual(p.stdout, "")
            out = json.loads(out_json.read_text(encoding="utf-8"))
        self.assertEqual(out["complexity"], "curated")
        self.assertLessEqual(len(out["colors"]["surfaces"]), 3)
        self.assertGreaterEqual(out["contrast"]["textBg"], 4.5)

    def test_pasted_text(self) -> None:
        p = self._run("brandbento.tools.map_palette", "--text", "coolors.co/780000-c1121f-fdf0d5")
        self.assertEqual(p.returncode, 0, p.stderr)
        out = json.loads(p.stdout)
        self.assertEqual(out["colors"]["paletteColors"], ["#780000", "#C1121F", "#FDF0D5"])

    def test_errors_exit_2(self) -> None:
        for args in (
            (),
            ("--palette-id", "nope"),
            ("--text", "hello"),
            ("--min-contrast", "40", "#FFFFFF", "#000000"),
            ("--min-contrast", "2", "#FFFFFF", "#000000"),
        ):
            p = self._run("brandbento.tools.map_palette", *args)
            self.assertEqual(p.returncode, 2, args)
            self.assertIn("[brandbento-map] ERROR:", p.stderr)


class TestExportBrandToolContract(_ToolCase):
    def test_exports_css_from_document(self) -> None:
        p = self._run("brandbento.tools.export_brand", "--in", str(FIXTURES / "legacy_document_v1.json"))
        self.assertEqual(p.returncode, 0, p.stderr)
        self.assertIn("--color-bg: #F5F7FA;", p.stdout)
        self.assertIn('--logo-text: "LEGACY";', p.stdout)

    def test_exports_json_from_bare_brand(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            src = Path(td) / "brand.json"
            src.write_text(json.dumps({"logo": {"text": "BARE"}}), encoding="utf-8")
            p = self._run("brandbento.tools.export_brand", "--in", str(src), "--format", "json")
        self.assertEqual(p.returncode, 0, p.stderr)
        self.assertEqual(json.loads(p.stdout)["logo"]["text"], "BARE")

    def test_missing_and_broken_inputs(self) -> None:
        p = self._run("brandbento.tools.export_brand", "--in", "/nonexistent/brand.json")
        self.assertEqual(p.returncode, 2)
        self.assertIn("Missing JSON file", p.stderr)

        with tempfile.TemporaryDirectory() as td:
            bad = Path(td) / "bad.json"
            bad.write_text("[1, 2]", encoding="utf-8")
            p = self._run("brandbento.tools.export_brand", "--in", str(bad))
        self.assertEqual(p.returncode, 2)
        self.assertIn("[brandbento-export] ERROR:", p.stderr)


class TestValidateDocumentToolContract(_ToolCase):
    def test_valid_document(self) -> None:
        p = self._run("brandbento.tools.validate_document", str(FIXTURES / "document_v2.json"))
        self.assertEqual(p.returncode, 0, p.stderr)
        self.assertIn("[brandbento-validate] OK", p.stdout)

    def test_invalid_document_exits_3(self) -> None:
        p = self._run("brandbento.tools.validate_document", "--upgrade", str(FIXTURES / "legacy_document_v1.json"))
        self.assertEqual(p.returncode, 3)
        self.assertIn("[brandbento-validate] FAIL", p.stderr)
        self.assertIn("brand.logo.image has unrecognized scheme", p.stderr)

    def test_unsupported_version_exits_2(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            newer = Path(td) / "newer.json"
            newer.write_text(json.dumps({"schemaVersion": 9}), encoding="utf-8")
            p = self._run("brandbento.tools.validate_document", "--upgrade", str(newer))
        self.assertEqual(p.returncode, 2)
        self.assertIn("newer than supported", p.stderr)


class TestDispatcherContract(_ToolCase):
    def test_python_m_brandbento_dispatches(self) -> None:
        p = self._run("brandbento", "validate", str(FIXTURES / "document_v2.json"))
        self.assertEqual(p.returncode, 0, p.stderr)
        self.assertIn("[brandbento-validate] OK", p.stdout)

    def test_no_command_prints_help(self) -> None:
        p = self._run("brandbento")
        self.assertEqual(p.returncode, 2)
        self.assertIn("usage: brandbento", p.stderr)

        p = self._run("brandbento", "--help")
        self.assertEqual(p.returncode, 0)
        self.assertIn("map", p.stdout)

    def test_subcommand_help_uses_dispatcher_prog(self) -> None:
        p = self._run("brandbento", "map", "--help")
        self.assertEqual(p.returncode, 0)
        self.assertIn("usage: brandbento map", p.stdout)


if __name__ == "__main__":
    unittest.main(verbosity=2)
