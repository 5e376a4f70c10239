"""
Script: orchestrator_ci/common.py
What: Shared helper functions used by all `orchestrator_ci` modules.
Doing: Wraps env reads, process launch and append-only log writes.
Why: Avoids duplicated helper code.
Goal: Keep behavior consistent across all command modules.
"""

from __future__ import annotations

import os
import subprocess
from datetime import datetime
from pathlib import Path
from typing import Sequence


class OrchestratorCiError(RuntimeError):
    """Raised when a command hits a known error condition."""


LOG_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def optional_env(name: str, default: str = "") -> str:
    """Return an environment variable with a fallback default."""
    return os.environ.get(name, default)


def log_dir() -> Path:
    """Directory for per-command log files (`ORCH_CI_LOG_DIR`, default: cwd)."""
    return Path(optional_env("ORCH_CI_LOG_DIR", "."))


def log_file_for(command_name: str) -> Path:
    """Return the log file path for one command, e.g. `orchestrator-job-run.log`."""
    return log_dir() / f"orchestrator-{command_name}.log"


def append_log(log_file: Path, message: str) -> None:
    """
    Append one timestamped line to `log_file` and echo it to stdout.

    The file is opened in append mode on every call, so several commands in the
    same job can share one log directory without clobbering each other.
    """
    line = f"{datetime.now().strftime(LOG_TIMESTAMP_FORMAT)} {message}"
    log_file.parent.mkdir(parents=True, exist_ok=True)
    with open(log_file, "a", encoding="utf-8") as handle:
        handle.write(line + "\n")
    print(line)


def run_process(args: Sequence[str], *, cwd: str | None = None) -> int:
    """
    Run a command with inherited stdout/stderr and return its exit code.

    A non-zero exit code is returned as-is (not raised) so callers can propagate
    it unchanged as their own exit status.
    """
    try:
        result = subprocess.run(list(args), check=False, cwd=cwd)
    except OSError as exc:
        raise OrchestratorCiError(f"Failed to start {args[0]}: {exc}") from exc
    return result.returncode


def require_positive_int(name: str, value: str) -> None:
    """Reject a non-empty argument that is not a whole number above zero."""
    if value and (not value.isdigit() or int(value) <= 0):
        raise OrchestratorCiError(f"-{name} must be a positive integer, got {value!r}")
