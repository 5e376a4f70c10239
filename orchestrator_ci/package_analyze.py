"""
Script: orchestrator_ci/package_analyze.py
What: Runs Workflow Analyzer rules on a project with `uipcli package analyze`.
Doing: Maps analyzer options to CLI flags and runs the CLI.
Why: Lets pipelines fail early on rule violations before packing.
Goal: Gate packaging on analyzer results.
"""

from __future__ import annotations

import argparse

from orchestrator_ci.arguments import OptionSpec
from orchestrator_ci.common import log_file_for
from orchestrator_ci.uipcli import TRACE_LEVELS, add_cli_arguments, cli_options, run_uipcli


COMMAND_NAME = "package-analyze"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python3 -m orchestrator_ci.cli package-analyze",
        description="Analyze a UiPath project with Workflow Analyzer.",
        allow_abbrev=False,
    )
    parser.add_argument("project_path", help="path to project.json or its folder")
    parser.add_argument("-analyzerTraceLevel", choices=TRACE_LEVELS, default=None)
    parser.add_argument("-stopOnRuleViolation", choices=("true", "false"), default=None)
    parser.add_argument("-treatWarningsAsErrors", choices=("true", "false"), default=None)
    parser.add_argument("-resultPath", default="", help="JSON file for analyzer results")
    parser.add_argument("-ignoredRules", default="", help="comma-separated rule ids to skip")
    add_cli_arguments(parser)
    return parser


def build_options(args: argparse.Namespace) -> OptionSpec:
    options = (
        OptionSpec()
        .positional("group", "package")
        .positional("action", "analyze")
        .positional("project_path", args.project_path)
        .flag("--analyzerTraceLevel", args.analyzerTraceLevel)
        .flag("--stopOnRuleViolation", args.stopOnRuleViolation)
        .flag("--treatWarningsAsErrors", args.treatWarningsAsErrors)
        .flag("--resultPath", args.resultPath)
        .flag("--ignoredRules", args.ignoredRules)
    )
    return options.extend(cli_options(args))


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    return run_uipcli(build_options(args), log_file=log_file_for(COMMAND_NAME), version=args.cliVersion)


if __name__ == "__main__":
    raise SystemExit(main())
