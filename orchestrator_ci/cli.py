from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Mapping

from orchestrator_ci.common import OrchestratorCiError


CommandFunc = Callable[[list[str]], int]


def command_map() -> dict[str, CommandFunc]:
    """
    Map CLI command names to Python entry functions.

    Each value is a `main(argv)` function from one command module and returns
    the `uipcli` exit code.
    """
    from orchestrator_ci.asset_manage import main as asset_manage
    from orchestrator_ci.job_run import main as job_run
    from orchestrator_ci.package_analyze import main as package_analyze
    from orchestrator_ci.package_deploy import main as package_deploy
    from orchestrator_ci.package_pack import main as package_pack
    from orchestrator_ci.testset_run import main as testset_run

    return {
        "package-pack": package_pack,
        "package-analyze": package_analyze,
        "package-deploy": package_deploy,
        "job-run": job_run,
        "test-run": testset_run,
        "asset-manage": asset_manage,
    }


def build_parser(commands: Mapping[str, CommandFunc]) -> argparse.ArgumentParser:
    """Build argument parser with one positional command choice."""
    parser = argparse.ArgumentParser(
        prog="python3 -m orchestrator_ci.cli",
        description="Run one uipcli pipeline command.",
    )
    parser.add_argument("command", choices=sorted(commands.keys()))
    return parser


def run_command(command: str, argv: list[str], commands: Mapping[str, CommandFunc]) -> int:
    """
    Run one registered command and return its exit code.

    `commands` is passed in to keep this function easy to test.
    """
    return commands[command](argv)


def main(argv: list[str] | None = None) -> None:
    # Build command registry once so parser and dispatcher use the same keys.
    commands = command_map()
    parser = build_parser(commands)
    argv = sys.argv[1:] if argv is None else argv
    # Only the command name is parsed here; everything after it belongs to the command.
    args = parser.parse_args(argv[:1])

    try:
        exit_code = run_command(args.command, argv[1:], commands)
    except OrchestratorCiError as exc:
        # Keep failures short and readable in workflow logs.
        print(str(exc), file=sys.stderr)
        raise SystemExit(1) from exc

    # The CLI's own exit code becomes the step result unchanged.
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
