"""
Script: tests/test_cli.py
What: Tests for the shared `orchestrator_ci` command dispatcher.
Doing: Checks command-map entries, parser behavior, argument forwarding and exit codes.
Why: Makes sure workflow command names still point to the right modules.
Goal: Protect the main command entry surface used by workflow steps.
"""

from __future__ import annotations

import io
import unittest
from contextlib import redirect_stderr
from unittest import mock

from orchestrator_ci import cli
from orchestrator_ci.cli import build_parser, command_map, run_command
from orchestrator_ci.common import OrchestratorCiError


class CliTests(unittest.TestCase):
    def test_command_map_contains_expected_entries(self) -> None:
        commands = command_map()
        expected = {
            "package-pack",
            "package-analyze",
            "package-deploy",
            "job-run",
            "test-run",
            "asset-manage",
        }
        self.assertEqual(set(commands.keys()), expected)

    def test_parser_accepts_known_command(self) -> None:
        parser = build_parser({"demo-command": lambda argv: 0})
        args = parser.parse_args(["demo-command"])
        self.assertEqual(args.command, "demo-command")

    def test_run_command_forwards_arguments(self) -> None:
        received: list[list[str]] = []

        def _target(argv: list[str]) -> int:
            received.append(argv)
            return 0

        run_command("demo", ["-a", "1"], {"demo": _target})
        self.assertEqual(received, [["-a", "1"]])

    def test_main_exits_with_command_exit_code(self) -> None:
        commands = {"demo": lambda argv: 4}
        with mock.patch.object(cli, "command_map", return_value=commands):
            with self.assertRaises(SystemExit) as ctx:
                cli.main(["demo", "-destination_folder", "out"])
        self.assertEqual(ctx.exception.code, 4)

    def test_main_reports_known_errors_with_exit_code_one(self) -> None:
        def _failing(argv: list[str]) -> int:
            raise OrchestratorCiError("Missing Orchestrator credentials")

        stderr = io.StringIO()
        with mock.patch.object(cli, "command_map", return_value={"demo": _failing}):
            with redirect_stderr(stderr), self.assertRaises(SystemExit) as ctx:
                cli.main(["demo"])
        self.assertEqual(ctx.exception.code, 1)
        self.assertIn("Missing Orchestrator credentials", stderr.getvalue())


if __name__ == "__main__":
    unittest.main()
