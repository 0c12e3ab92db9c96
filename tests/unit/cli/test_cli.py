"""CLI behavior tests for ``infotree.cli.main``.

Covers focus selection, depth handling, config fallbacks, and error exits.
"""

from __future__ import annotations

import io
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from infotree import cli, config

FIXTURE = Path(__file__).resolve().parents[2] / "fixtures" / "sample_snapshot.json"


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.config_path = Path(self._tmp.name) / "config.json"
        patcher = mock.patch("infotree.config.CONFIG_PATH", self.config_path)
        patcher.start()
        self.addCleanup(patcher.stop)

    def _run(self, argv: list[str]) -> str:
        with mock.patch("sys.stdout", new_callable=io.StringIO) as stdout:
            cli.main(argv)
        return stdout.getvalue()

    def test_prints_symbol_tree_to_requested_depth(self) -> None:
        output = self._run([str(FIXTURE), "--symbol", "400", "--depth", "1", "--no-color"])

        self.assertEqual(output, "  Qualified name: foo::bar\n")

    def test_prints_file_tree(self) -> None:
        output = self._run([str(FIXTURE), "--file", "f1", "--depth", "2", "--no-color"])

        self.assertEqual(
            output.splitlines(),
            [
                "▾ Includes",
                '    1:1: #include "foo.h"',
                "▾ Functions",
                "    + 10:1: void bar()",
                "    [G] 30:1: int qux = foo(2)",
            ],
        )

    def test_uses_configured_snapshot_and_depth(self) -> None:
        config.save_snapshot_path(FIXTURE)
        config.save_default_depth(1)

        output = self._run(["--symbol", "100", "--no-color"])

        self.assertEqual(
            output.splitlines()[3:],
            ["▸ Caller", "▸ Usage", "▸ Parameters", "▸ This calls"],
        )

    def test_unknown_symbol_exits_with_message(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            self._run([str(FIXTURE), "--symbol", "missing", "--no-color"])

        self.assertIn("unknown symbol id: missing", str(ctx.exception.code))

    def test_malformed_snapshot_value_exits_with_message(self) -> None:
        snapshot = Path(self._tmp.name) / "bad.json"
        snapshot.write_text(
            '{"symbols": {"1": {"range": {"file": "f", "startpos": {"line": null, "column": 1}}}}}',
            encoding="utf-8",
        )

        with self.assertRaises(SystemExit) as ctx:
            self._run([str(snapshot), "--symbol", "1", "--no-color"])

        self.assertIn("line of reference", str(ctx.exception.code))

    def test_missing_snapshot_exits(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            self._run([str(Path(self._tmp.name) / "nope.json"), "--symbol", "1"])

        self.assertIn("Snapshot not found", str(ctx.exception.code))

    def test_no_snapshot_configured_exits(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            self._run(["--symbol", "1"])

        self.assertIn("No snapshot", str(ctx.exception.code))

    def test_focus_option_is_required(self) -> None:
        with mock.patch("sys.stderr", new_callable=io.StringIO):
            with self.assertRaises(SystemExit):
                cli.main([str(FIXTURE)])

    def test_depth_must_be_positive(self) -> None:
        with mock.patch("sys.stderr", new_callable=io.StringIO):
            with self.assertRaises(SystemExit):
                cli.main([str(FIXTURE), "--symbol", "100", "--depth", "0"])


if __name__ == "__main__":
    unittest.main()
