"""
Script: orchestrator_ci/credentials.py
What: Shared Orchestrator authentication and target parameters.
Doing: Adds auth arguments to a parser, checks that exactly one auth mode is complete, and maps them to CLI flags.
Why: Deploy, job, test and asset commands all authenticate the same way.
Goal: Validate credentials before the CLI runs and tag every secret with its kind for masking.
"""

from __future__ import annotations

import argparse

from orchestrator_ci.arguments import OptionSpec
from orchestrator_ci.common import OrchestratorCiError


def add_auth_arguments(parser: argparse.ArgumentParser) -> None:
    """Add auth, folder and language arguments (single-dash names used by pipelines)."""
    group = parser.add_argument_group("Orchestrator authentication")
    group.add_argument("-orchestrator_user", default="", help="on-prem username")
    group.add_argument("-orchestrator_pass", default="", help="on-prem password")
    group.add_argument("-UserKey", default="", help="cloud refresh token (user key)")
    group.add_argument("-pat", default="", help="personal access token")
    group.add_argument("-account_name", default="", help="cloud account logical name")
    group.add_argument("-application_id", default="", help="external application id")
    group.add_argument("-application_secret", default="", help="external application secret")
    group.add_argument("-application_scope", default="", help="external application scopes")
    group.add_argument("-account_for_app", default="", help="account name for external app auth")
    parser.add_argument("-folder_organization_unit", default="", help="Orchestrator folder")
    parser.add_argument("-language", default="", help="language used by the CLI for messages")


def detect_auth_mode(args: argparse.Namespace) -> str:
    """
    Return which auth mode the arguments describe.

    Exactly one of these must be complete:
    - on-prem: username + password
    - cloud: user key + account name, or a personal access token
    - external-app: application id + secret + scope
    """
    on_prem_fields = [args.orchestrator_user, args.orchestrator_pass]
    app_fields = [args.application_id, args.application_secret, args.application_scope]

    if args.UserKey and args.pat:
        raise OrchestratorCiError("Pass either -UserKey or -pat, not both")

    supplied: list[str] = []
    if any(on_prem_fields):
        if not all(on_prem_fields):
            raise OrchestratorCiError(
                "On-prem authentication needs both -orchestrator_user and -orchestrator_pass"
            )
        supplied.append("on-prem")
    if args.UserKey or args.pat:
        if args.UserKey and not args.account_name:
            raise OrchestratorCiError("Cloud authentication with -UserKey needs -account_name")
        supplied.append("cloud")
    if any(app_fields):
        if not all(app_fields):
            raise OrchestratorCiError(
                "External app authentication needs -application_id, "
                "-application_secret and -application_scope"
            )
        supplied.append("external-app")

    if not supplied:
        raise OrchestratorCiError(
            "Missing Orchestrator credentials: pass -orchestrator_user/-orchestrator_pass, "
            "-UserKey/-account_name, -pat, or -application_id/-application_secret/-application_scope"
        )
    if len(supplied) > 1:
        raise OrchestratorCiError(
            f"Conflicting Orchestrator credentials: {', '.join(supplied)}. Pass exactly one mode."
        )
    return supplied[0]


def auth_options(args: argparse.Namespace) -> OptionSpec:
    """Validate credentials and map them to CLI flags."""
    mode = detect_auth_mode(args)
    options = OptionSpec()
    if mode == "on-prem":
        options = options.flag("-u", args.orchestrator_user).flag(
            "-p", args.orchestrator_pass, secret="password"
        )
    elif mode == "cloud":
        options = options.flag("-t", args.UserKey or args.pat, secret="token").flag(
            "-a", args.account_name
        )
    else:
        options = (
            options.flag("-A", args.account_for_app or args.account_name)
            .flag("-I", args.application_id)
            .flag("-S", args.application_secret, secret="client_secret")
            .flag("--applicationScope", args.application_scope)
        )
    return (
        options.flag("-o", args.folder_organization_unit)
        .flag("-l", args.language)
    )
