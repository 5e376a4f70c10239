"""
Script: tests/test_package_pack.py
What: Tests flag mapping in `orchestrator_ci/package_pack.py`.
Doing: Parses realistic pipeline arguments and checks the built and masked vectors.
Why: Pack runs on every push and forwards library feed credentials.
Goal: Keep pack arguments stable and its secrets masked.
"""

from __future__ import annotations

import unittest
from unittest import mock

from orchestrator_ci import package_pack
from orchestrator_ci.common import OrchestratorCiError


def options_for(*argv: str):
    return package_pack.build_options(package_pack.build_parser().parse_args(list(argv)))


class PackagePackTests(unittest.TestCase):
    def test_minimal_pack(self) -> None:
        options = options_for("CICDGithub/project.json", "-destination_folder", "./package")
        self.assertEqual(
            options.arguments(),
            ["package", "pack", "CICDGithub/project.json", "-o", "./package"],
        )

    def test_version_output_type_and_telemetry(self) -> None:
        options = options_for(
            "project.json",
            "-destination_folder", "out",
            "-version", "1.2.3",
            "-outputType", "Library",
            "-traceLevel", "Verbose",
            "-disableTelemetry",
        )
        self.assertEqual(
            options.arguments(),
            [
                "package", "pack", "project.json",
                "-o", "out",
                "-v", "1.2.3",
                "--outputType", "Library",
                "--traceLevel", "Verbose",
                "--disableTelemetry",
            ],
        )

    def test_auto_version_switch(self) -> None:
        options = options_for("project.json", "-destination_folder", "out", "-autoVersion")
        self.assertIn("--autoVersion", options.arguments())
        self.assertNotIn("-v", options.arguments())

    def test_version_and_auto_version_conflict(self) -> None:
        with self.assertRaises(OrchestratorCiError):
            options_for("project.json", "-destination_folder", "out", "-version", "1.0.0", "-autoVersion")

    def test_library_credentials_are_masked_by_kind(self) -> None:
        options = options_for(
            "project.json",
            "-destination_folder", "out",
            "-libraryOrchestratorUrl", "https://cloud.uipath.com/acct/tenant",
            "-libraryOrchestratorTenant", "DefaultTenant",
            "-libraryOrchestratorPassword", "hunter2",
            "-libraryOrchestratorAuthToken", "abcd1234567",
            "-libraryOrchestratorApplicationSecret", "s3cr3t",
        )
        arguments = options.arguments()
        redacted = options.redacted()

        self.assertIn("hunter2", arguments)
        self.assertEqual(len(arguments), len(redacted))
        self.assertIn("*******", redacted)
        self.assertIn("abcd*******", redacted)
        self.assertIn("******", redacted)
        for secret in ("hunter2", "abcd1234567", "s3cr3t"):
            self.assertNotIn(secret, redacted)

    def test_library_credentials_need_url_and_tenant(self) -> None:
        with self.assertRaises(OrchestratorCiError):
            options_for("project.json", "-destination_folder", "out", "-libraryOrchestratorPassword", "pw")

    def test_destination_is_required(self) -> None:
        with self.assertRaises(SystemExit):
            package_pack.build_parser().parse_args(["project.json"])

    def test_main_returns_cli_exit_code(self) -> None:
        with mock.patch.object(package_pack, "run_uipcli", return_value=5) as run_uipcli:
            exit_code = package_pack.main(["project.json", "-destination_folder", "out", "-cliVersion", "23.4.1"])

        self.assertEqual(exit_code, 5)
        self.assertEqual(run_uipcli.call_args.kwargs["version"], "23.4.1")
        self.assertTrue(str(run_uipcli.call_args.kwargs["log_file"]).endswith("orchestrator-package-pack.log"))


if __name__ == "__main__":
    unittest.main()
