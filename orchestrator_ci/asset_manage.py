"""
Script: orchestrator_ci/asset_manage.py
What: Deploys or deletes Orchestrator assets from a CSV file with `uipcli asset`.
Doing: Checks the CSV exists, validates credentials, maps options to CLI flags and runs the CLI.
Why: Asset values (often credentials) are kept in the repo's pipeline, not set by hand per tenant.
Goal: Keep tenant assets in sync with the pipeline's asset file.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from orchestrator_ci.arguments import OptionSpec
from orchestrator_ci.common import OrchestratorCiError, log_file_for
from orchestrator_ci.credentials import add_auth_arguments, auth_options
from orchestrator_ci.uipcli import add_cli_arguments, cli_options, run_uipcli


COMMAND_NAME = "asset-manage"
OPERATIONS = ("deploy", "delete")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python3 -m orchestrator_ci.cli asset-manage",
        description="Deploy or delete Orchestrator assets listed in a CSV file.",
        allow_abbrev=False,
    )
    parser.add_argument("operation", choices=OPERATIONS)
    parser.add_argument("assets_file", help="CSV file with name,type,value rows")
    parser.add_argument("orchestrator_url")
    parser.add_argument("orchestrator_tenant")
    add_auth_arguments(parser)
    add_cli_arguments(parser)
    return parser


def build_options(args: argparse.Namespace) -> OptionSpec:
    if not Path(args.assets_file).is_file():
        raise OrchestratorCiError(f"Assets file not found: {args.assets_file}")

    options = (
        OptionSpec()
        .positional("group", "asset")
        .positional("action", args.operation)
        .positional("assets_file", args.assets_file)
        .positional("orchestrator_url", args.orchestrator_url)
        .positional("orchestrator_tenant", args.orchestrator_tenant)
    )
    return options.extend(auth_options(args)).extend(cli_options(args))


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    options = build_options(args)
    return run_uipcli(options, log_file=log_file_for(COMMAND_NAME), version=args.cliVersion)


if __name__ == "__main__":
    raise SystemExit(main())
