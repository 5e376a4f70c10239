"""
Script: orchestrator_ci/package_deploy.py
What: Publishes packages to Orchestrator with `uipcli package deploy`.
Doing: Validates credentials, maps deploy options to CLI flags and runs the CLI.
Why: Deploy needs tenant credentials on the command line, so the logged command must be masked.
Goal: Upload the packed `.nupkg` files and optionally create or update their processes.
"""

from __future__ import annotations

import argparse

from orchestrator_ci.arguments import OptionSpec
from orchestrator_ci.common import log_file_for
from orchestrator_ci.credentials import add_auth_arguments, auth_options
from orchestrator_ci.uipcli import add_cli_arguments, cli_options, run_uipcli


COMMAND_NAME = "package-deploy"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python3 -m orchestrator_ci.cli package-deploy",
        description="Deploy packages to an Orchestrator tenant.",
        allow_abbrev=False,
    )
    parser.add_argument("package_path", help="a .nupkg file or a folder of packages")
    parser.add_argument("orchestrator_url")
    parser.add_argument("orchestrator_tenant")
    parser.add_argument("-environment_list", default="", help="comma-separated environments (classic folders)")
    parser.add_argument("-entryPoints", default="", help="comma-separated entry point paths")
    parser.add_argument("-createProcess", choices=("true", "false"), default=None)
    add_auth_arguments(parser)
    add_cli_arguments(parser)
    return parser


def build_options(args: argparse.Namespace) -> OptionSpec:
    options = (
        OptionSpec()
        .positional("group", "package")
        .positional("action", "deploy")
        .positional("package_path", args.package_path)
        .positional("orchestrator_url", args.orchestrator_url)
        .positional("orchestrator_tenant", args.orchestrator_tenant)
    )
    options = options.extend(auth_options(args))
    options = (
        options.flag("-e", args.environment_list)
        .flag("--entryPointsPath", args.entryPoints)
        .flag("--createProcess", args.createProcess)
    )
    return options.extend(cli_options(args))


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    options = build_options(args)
    return run_uipcli(options, log_file=log_file_for(COMMAND_NAME), version=args.cliVersion)


if __name__ == "__main__":
    raise SystemExit(main())
