from __future__ import annotations

import unittest

from orchestrator_ci import package_analyze


class PackageAnalyzeTests(unittest.TestCase):
    def test_maps_analyzer_options(self) -> None:
        args = package_analyze.build_parser().parse_args(
            [
                "project.json",
                "-analyzerTraceLevel", "Warning",
                "-stopOnRuleViolation", "true",
                "-resultPath", "analyze.json",
                "-ignoredRules", "ST-NMG-001,ST-DBP-002",
            ]
        )
        self.assertEqual(
            package_analyze.build_options(args).arguments(),
            [
                "package", "analyze", "project.json",
                "--analyzerTraceLevel", "Warning",
                "--stopOnRuleViolation", "true",
                "--resultPath", "analyze.json",
                "--ignoredRules", "ST-NMG-001,ST-DBP-002",
            ],
        )

    def test_defaults_add_no_flags(self) -> None:
        args = package_analyze.build_parser().parse_args(["project.json"])
        self.assertEqual(
            package_analyze.build_options(args).arguments(),
            ["package", "analyze", "project.json"],
        )


if __name__ == "__main__":
    unittest.main()
