"""
Script: orchestrator_ci/testset_run.py
What: Runs Orchestrator test sets or a test project with `uipcli test run`.
Doing: Checks that exactly one test target is given, maps test options to CLI flags and runs the CLI.
Why: Test results gate promotion, so the CLI exit code must become the step result.
Goal: Execute tests on Orchestrator and write a result report for the pipeline.
"""

from __future__ import annotations

import argparse

from orchestrator_ci.arguments import OptionSpec
from orchestrator_ci.common import OrchestratorCiError, log_file_for, require_positive_int
from orchestrator_ci.credentials import add_auth_arguments, auth_options
from orchestrator_ci.uipcli import add_cli_arguments, cli_options, run_uipcli


COMMAND_NAME = "test-run"
REPORT_TYPES = ("junit", "uipath")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python3 -m orchestrator_ci.cli test-run",
        description="Run tests on an Orchestrator tenant.",
        allow_abbrev=False,
    )
    parser.add_argument("orchestrator_url")
    parser.add_argument("orchestrator_tenant")
    parser.add_argument("-project_path", default="", help="test project to pack and run")
    parser.add_argument("-testset", default="", help="existing Orchestrator test set")
    parser.add_argument("-environment", default="", help="environment (classic folders)")
    parser.add_argument("-out", choices=REPORT_TYPES, default=None, help="result report format")
    parser.add_argument("-result_path", default="", help="file for the test report")
    parser.add_argument("-timeout", default="", help="seconds to wait for the test run")
    parser.add_argument("-attachRobotLogs", choices=("true", "false"), default=None)
    add_auth_arguments(parser)
    add_cli_arguments(parser)
    return parser


def build_options(args: argparse.Namespace) -> OptionSpec:
    # The CLI either packs and runs a project or runs an existing test set.
    if bool(args.project_path) == bool(args.testset):
        raise OrchestratorCiError("Pass exactly one of -project_path or -testset")
    require_positive_int("timeout", args.timeout)

    options = (
        OptionSpec()
        .positional("group", "test")
        .positional("action", "run")
        .positional("orchestrator_url", args.orchestrator_url)
        .positional("orchestrator_tenant", args.orchestrator_tenant)
    )
    options = options.extend(auth_options(args))
    options = (
        options.flag("-P", args.project_path)
        .flag("-s", args.testset)
        .flag("-e", args.environment)
        .flag("--out", args.out)
        .flag("-r", args.result_path)
        .flag("-T", args.timeout)
        .flag("--attachRobotLogs", args.attachRobotLogs)
    )
    return options.extend(cli_options(args))


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    options = build_options(args)
    return run_uipcli(options, log_file=log_file_for(COMMAND_NAME), version=args.cliVersion)


if __name__ == "__main__":
    raise SystemExit(main())
