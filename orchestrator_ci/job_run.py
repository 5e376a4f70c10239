"""
Script: orchestrator_ci/job_run.py
What: Starts an Orchestrator job with `uipcli job run`.
Doing: Validates credentials and job options, maps them to CLI flags and runs the CLI.
Why: Pipelines trigger processes after deploy and need the job result as the step result.
Goal: Run a deployed process and propagate its outcome as the exit code.
"""

from __future__ import annotations

import argparse

from orchestrator_ci.arguments import OptionSpec
from orchestrator_ci.common import log_file_for, require_positive_int
from orchestrator_ci.credentials import add_auth_arguments, auth_options
from orchestrator_ci.uipcli import add_cli_arguments, cli_options, run_uipcli


COMMAND_NAME = "job-run"
PRIORITIES = ("Low", "Normal", "High")
BOOL_CHOICES = ("true", "false")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python3 -m orchestrator_ci.cli job-run",
        description="Run a process as an Orchestrator job.",
        allow_abbrev=False,
    )
    parser.add_argument("processName")
    parser.add_argument("orchestrator_url")
    parser.add_argument("orchestrator_tenant")
    parser.add_argument("-input_path", default="", help="JSON file with input arguments")
    parser.add_argument("-priority", choices=PRIORITIES, default=None)
    parser.add_argument("-robots", default="", help="comma-separated robot names")
    parser.add_argument("-fail_when_job_fails", choices=BOOL_CHOICES, default=None)
    parser.add_argument("-timeout", default="", help="seconds to wait for the job")
    parser.add_argument("-result_path", default="", help="JSON file for job results")
    parser.add_argument("-jobscount", default="", help="number of jobs to start")
    parser.add_argument("-user", default="", help="user to run the job as (modern folders)")
    parser.add_argument("-machine", default="", help="machine to run the job on (modern folders)")
    parser.add_argument("-wait", choices=BOOL_CHOICES, default=None)
    add_auth_arguments(parser)
    add_cli_arguments(parser)
    return parser


def build_options(args: argparse.Namespace) -> OptionSpec:
    require_positive_int("timeout", args.timeout)
    require_positive_int("jobscount", args.jobscount)

    options = (
        OptionSpec()
        .positional("group", "job")
        .positional("action", "run")
        .positional("processName", args.processName)
        .positional("orchestrator_url", args.orchestrator_url)
        .positional("orchestrator_tenant", args.orchestrator_tenant)
    )
    options = options.extend(auth_options(args))
    options = (
        options.flag("-i", args.input_path)
        .flag("-P", args.priority)
        .flag("-r", args.robots)
        .flag("-f", args.fail_when_job_fails)
        .flag("-T", args.timeout)
        .flag("-R", args.result_path)
        .flag("-j", args.jobscount)
        .flag("-U", args.user)
        .flag("-M", args.machine)
        .flag("-w", args.wait)
    )
    return options.extend(cli_options(args))


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    options = build_options(args)
    return run_uipcli(options, log_file=log_file_for(COMMAND_NAME), version=args.cliVersion)


if __name__ == "__main__":
    raise SystemExit(main())
