"""
Script: orchestrator_ci/uipcli.py
What: Locates, downloads and runs the UiPath CLI (`uipcli`).
Doing: Resolves the CLI path per platform, fetches the NuGet package when missing, logs the masked invocation and runs it.
Why: CI runners start empty, and every command needs the same bootstrap and logging steps.
Goal: Give each command one call that turns an `OptionSpec` into a CLI exit code.
"""

from __future__ import annotations

import argparse
import os
import shutil
import urllib.request
import zipfile
from pathlib import Path

from orchestrator_ci.arguments import OptionSpec
from orchestrator_ci.common import OrchestratorCiError, append_log, optional_env, run_process


DEFAULT_CLI_VERSION = "22.10.8438.32859"
DEFAULT_CLI_HOME = "uipathcli"
CLI_FEED_URL = (
    "https://uipath.pkgs.visualstudio.com/Public.Feeds/_apis/packaging/feeds/"
    "1c781268-d43d-45ab-9dfc-0151a1c740b7/nuget/packages/{package}/versions/{version}/content"
)
TRACE_LEVELS = ("None", "Critical", "Error", "Warning", "Information", "Verbose")
DOWNLOAD_TIMEOUT_SECONDS = 300


def is_windows() -> bool:
    return os.name == "nt"


def cli_package_name(windows: bool) -> str:
    """The Windows build ships a native exe; other platforms use the dotnet build."""
    return "UiPath.CLI.Windows" if windows else "UiPath.CLI"


def cli_home() -> Path:
    return Path(optional_env("UIPCLI_HOME", DEFAULT_CLI_HOME))


def default_cli_version() -> str:
    return optional_env("UIPCLI_VERSION", DEFAULT_CLI_VERSION)


def cli_command(version: str, home: Path, *, windows: bool | None = None) -> list[str]:
    """
    Return the command prefix used to start the CLI.

    Windows: `<home>/<version>/tools/uipcli.exe`
    Others:  `dotnet <home>/<version>/tools/uipcli.dll`
    """
    if windows is None:
        windows = is_windows()
    tools_dir = home / version / "tools"
    if windows:
        return [str(tools_dir / "uipcli.exe")]
    return ["dotnet", str(tools_dir / "uipcli.dll")]


def download_cli(version: str, home: Path, log_file: Path, *, windows: bool) -> None:
    """
    Download the CLI NuGet package and extract it under `<home>/<version>`.

    A `.nupkg` is a zip archive; its `tools/` folder holds the executable.
    """
    package = cli_package_name(windows)
    url = CLI_FEED_URL.format(package=package, version=version)
    target_dir = home / version
    archive_path = home / f"{package}.{version}.nupkg"
    home.mkdir(parents=True, exist_ok=True)

    append_log(log_file, f"Downloading {package} {version} from {url}")
    try:
        with urllib.request.urlopen(url, timeout=DOWNLOAD_TIMEOUT_SECONDS) as response:
            with open(archive_path, "wb") as handle:
                shutil.copyfileobj(response, handle)
        # zipfile strips absolute paths and `..` parts from member names.
        with zipfile.ZipFile(archive_path) as archive:
            archive.extractall(target_dir)
    except (OSError, zipfile.BadZipFile) as exc:
        raise OrchestratorCiError(f"Failed to download uipcli {version} from {url}: {exc}") from exc
    finally:
        archive_path.unlink(missing_ok=True)
    append_log(log_file, f"Extracted uipcli to {target_dir}")


def ensure_cli(version: str, log_file: Path, *, home: Path | None = None) -> list[str]:
    """
    Return a runnable CLI command prefix, downloading the CLI when needed.

    `UIPCLI_PATH` points at a pre-installed executable and skips the download.
    """
    preinstalled = optional_env("UIPCLI_PATH")
    if preinstalled:
        if not Path(preinstalled).exists():
            raise OrchestratorCiError(f"UIPCLI_PATH does not exist: {preinstalled}")
        if preinstalled.endswith(".dll"):
            return ["dotnet", preinstalled]
        return [preinstalled]

    windows = is_windows()
    home = home or cli_home()
    command = cli_command(version, home, windows=windows)
    executable = Path(command[-1])
    if not executable.exists():
        download_cli(version, home, log_file, windows=windows)
        if not executable.exists():
            raise OrchestratorCiError(f"uipcli not found at {executable} after download")
    return command


def add_cli_arguments(parser: argparse.ArgumentParser) -> None:
    """Arguments every command accepts, independent of the Orchestrator call."""
    parser.add_argument("-cliVersion", default=None, help="uipcli version to download and run")
    parser.add_argument("-traceLevel", choices=TRACE_LEVELS, default=None)
    parser.add_argument("-disableTelemetry", action="store_true")


def cli_options(args: argparse.Namespace) -> OptionSpec:
    return (
        OptionSpec()
        .flag("--traceLevel", args.traceLevel)
        .switch("--disableTelemetry", args.disableTelemetry)
    )


def run_uipcli(options: OptionSpec, *, log_file: Path, version: str | None = None) -> int:
    """
    Run the CLI with `options` and return its exit code.

    Only the masked vector is ever written to the log; the real vector goes
    straight to the subprocess.
    """
    command = ensure_cli(version or default_cli_version(), log_file)
    append_log(log_file, " ".join([*command, *options.redacted()]))
    exit_code = run_process([*command, *options.arguments()])
    append_log(log_file, f"uipcli exited with code {exit_code}")
    return exit_code
