"""
Script: orchestrator_ci/package_pack.py
What: Packs a UiPath project into a `.nupkg` with `uipcli package pack`.
Doing: Maps pack parameters (version, output type, library feed credentials) to CLI flags and runs the CLI.
Why: Packing is the first pipeline step and must not leak library-feed credentials into logs.
Goal: Produce the package artifact that later deploy steps publish.
"""

from __future__ import annotations

import argparse

from orchestrator_ci.arguments import OptionSpec
from orchestrator_ci.common import OrchestratorCiError, log_file_for
from orchestrator_ci.uipcli import add_cli_arguments, cli_options, run_uipcli


COMMAND_NAME = "package-pack"
OUTPUT_TYPES = ("Process", "Library", "Tests", "Objects", "None")

# Parameter name -> CLI flag for the library Orchestrator (used to restore
# libraries published to a tenant feed). Secret kinds drive log masking.
LIBRARY_FLAGS: list[tuple[str, str, str]] = [
    ("libraryOrchestratorUrl", "--libraryOrchestratorUrl", ""),
    ("libraryOrchestratorTenant", "--libraryOrchestratorTenant", ""),
    ("libraryOrchestratorUsername", "--libraryOrchestratorUsername", ""),
    ("libraryOrchestratorPassword", "--libraryOrchestratorPassword", "password"),
    ("libraryOrchestratorAuthToken", "--libraryOrchestratorAuthToken", "token"),
    ("libraryOrchestratorAccountName", "--libraryOrchestratorAccountName", ""),
    ("libraryOrchestratorApplicationId", "--libraryOrchestratorApplicationId", ""),
    ("libraryOrchestratorApplicationSecret", "--libraryOrchestratorApplicationSecret", "client_secret"),
    ("libraryOrchestratorApplicationScope", "--libraryOrchestratorApplicationScope", ""),
    ("libraryOrchestratorFolder", "--libraryOrchestratorFolder", ""),
]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python3 -m orchestrator_ci.cli package-pack",
        description="Pack a UiPath project into a NuGet package.",
        allow_abbrev=False,
    )
    parser.add_argument("project_path", help="path to project.json or its folder")
    parser.add_argument("-destination_folder", required=True, help="output folder for the package")
    parser.add_argument("-version", default="", help="explicit package version")
    parser.add_argument("-autoVersion", action="store_true", help="let the CLI pick a version")
    parser.add_argument("-outputType", choices=OUTPUT_TYPES, default=None)
    parser.add_argument("-language", default="")
    for name, _flag, _secret in LIBRARY_FLAGS:
        parser.add_argument(f"-{name}", default="")
    add_cli_arguments(parser)
    return parser


def library_options(args: argparse.Namespace) -> OptionSpec:
    """Library feed flags; any credential needs the feed URL and tenant as well."""
    values = {name: getattr(args, name) for name, _flag, _secret in LIBRARY_FLAGS}
    if any(values.values()) and not (
        values["libraryOrchestratorUrl"] and values["libraryOrchestratorTenant"]
    ):
        raise OrchestratorCiError(
            "Library Orchestrator options need both -libraryOrchestratorUrl "
            "and -libraryOrchestratorTenant"
        )

    options = OptionSpec()
    for name, flag, secret in LIBRARY_FLAGS:
        options = options.flag(flag, values[name], secret=secret)
    return options


def build_options(args: argparse.Namespace) -> OptionSpec:
    if args.version and args.autoVersion:
        raise OrchestratorCiError("Pass either -version or -autoVersion, not both")

    options = (
        OptionSpec()
        .positional("group", "package")
        .positional("action", "pack")
        .positional("project_path", args.project_path)
        .flag("-o", args.destination_folder)
        .flag("-v", args.version)
        .switch("--autoVersion", args.autoVersion)
        .flag("--outputType", args.outputType)
        .flag("-l", args.language)
    )
    return options.extend(library_options(args)).extend(cli_options(args))


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    options = build_options(args)
    return run_uipcli(options, log_file=log_file_for(COMMAND_NAME), version=args.cliVersion)


if __name__ == "__main__":
    raise SystemExit(main())
