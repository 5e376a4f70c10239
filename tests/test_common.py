"""
Script: tests/test_common.py
What: Tests shared helpers in `orchestrator_ci/common.py`.
Doing: Runs real subprocesses, writes logs to temp dirs and checks numeric argument validation.
Why: Every command relies on these helpers for exit codes and log lines.
Goal: Keep exit-code propagation and logging behavior stable.
"""

from __future__ import annotations

import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from orchestrator_ci.common import (
    OrchestratorCiError,
    append_log,
    log_file_for,
    require_positive_int,
    run_process,
)


class RunProcessTests(unittest.TestCase):
    def test_returns_non_zero_exit_code_without_raising(self) -> None:
        self.assertEqual(run_process([sys.executable, "-c", "raise SystemExit(3)"]), 3)

    def test_missing_executable_is_reported(self) -> None:
        with self.assertRaises(OrchestratorCiError):
            run_process(["definitely-not-a-real-uipcli-binary"])


class AppendLogTests(unittest.TestCase):
    def test_appends_timestamped_lines(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_file = Path(tmp) / "logs" / "orchestrator-test.log"
            append_log(log_file, "first")
            append_log(log_file, "second")
            lines = log_file.read_text(encoding="utf-8").splitlines()

        self.assertEqual(len(lines), 2)
        self.assertRegex(lines[0], r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2} first$")
        self.assertTrue(lines[1].endswith(" second"))

    def test_log_file_for_uses_log_dir(self) -> None:
        with mock.patch.dict(os.environ, {"ORCH_CI_LOG_DIR": "/var/log/ci"}):
            self.assertEqual(log_file_for("job-run"), Path("/var/log/ci/orchestrator-job-run.log"))


class RequirePositiveIntTests(unittest.TestCase):
    def test_accepts_empty_and_positive_values(self) -> None:
        require_positive_int("timeout", "")
        require_positive_int("timeout", "600")

    def test_rejects_zero_negative_and_text(self) -> None:
        for value in ("0", "-5", "ten"):
            with self.subTest(value=value), self.assertRaises(OrchestratorCiError):
                require_positive_int("timeout", value)


if __name__ == "__main__":
    unittest.main()
