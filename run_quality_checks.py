#!/usr/bin/env python
"""Run the lifesim formatters, linters and test suite in one go.

Usage:
    python run_quality_checks.py                  # check only
    python run_quality_checks.py --fix            # let black/isort rewrite files
    python run_quality_checks.py --skip lint type # leave out some checks
"""

import argparse
import subprocess
import sys
from typing import Callable, Optional

PACKAGE_DIR = "lifesim"
TESTS_DIR = "tests"
DIRS_TO_CHECK = [PACKAGE_DIR, TESTS_DIR]


class CheckRunner:
    """Runs each quality tool as a subprocess and tallies the results."""

    def __init__(self, fix: bool = False, verbose: bool = False, skip_checks: Optional[list[str]] = None):
        self.fix = fix
        self.verbose = verbose
        self.skip_checks = skip_checks or []
        self.failed_checks: list[str] = []
        self.passed_checks: list[str] = []

    def run_command(self, cmd: list[str], name: str) -> bool:
        """Run ``cmd`` and record it under ``name``.

        Output is captured unless verbose mode is on, and only printed when
        the command fails.
        """
        print(f"\n--- {name}: {' '.join(cmd)}")
        try:
            result = subprocess.run(
                cmd,
                check=False,
                capture_output=not self.verbose,
                text=True,
            )
        except FileNotFoundError as e:
            print(f"[FAIL] {name}: {e}")
            print('       Install the tools with: pip install -e ".[test,dev]"')
            self.failed_checks.append(name)
            return False

        if result.returncode == 0:
            print(f"[ OK ] {name}")
            self.passed_checks.append(name)
            return True

        if not self.verbose:
            print(result.stdout)
            print(result.stderr)
        print(f"[FAIL] {name}")
        self.failed_checks.append(name)
        return False

    def check_black_formatting(self) -> bool:
        cmd = ["black", *DIRS_TO_CHECK] if self.fix else ["black", "--check", *DIRS_TO_CHECK]
        return self.run_command(cmd, "black")

    def check_isort_imports(self) -> bool:
        cmd = ["isort", *DIRS_TO_CHECK] if self.fix else ["isort", "--check-only", *DIRS_TO_CHECK]
        return self.run_command(cmd, "isort")

    def check_pylint(self) -> bool:
        return self.run_command(["pylint", PACKAGE_DIR], "pylint")

    def check_mypy(self) -> bool:
        return self.run_command(["mypy", PACKAGE_DIR], "mypy")

    def check_vulture(self) -> bool:
        return self.run_command(["vulture", PACKAGE_DIR, "examples"], "vulture")

    def check_radon_complexity(self) -> bool:
        return self.run_command(["radon", "cc", PACKAGE_DIR, "-a"], "radon")

    def run_tests(self) -> bool:
        return self.run_command(
            ["pytest", f"--cov={PACKAGE_DIR}", "--cov-report=term-missing", TESTS_DIR],
            "pytest",
        )

    def print_summary(self) -> None:
        print("\n=== summary")
        for check in self.passed_checks:
            print(f"  passed: {check}")
        for check in self.failed_checks:
            print(f"  FAILED: {check}")

    def run_all(self) -> int:
        """Run every check not skipped; return a process exit code."""
        checks: list[tuple[str, Callable[[], bool]]] = [
            ("formatting", self.check_black_formatting),
            ("imports", self.check_isort_imports),
            ("lint", self.check_pylint),
            ("type", self.check_mypy),
            ("deadcode", self.check_vulture),
            ("complexity", self.check_radon_complexity),
            ("tests", self.run_tests),
        ]

        for check_name, check_func in checks:
            if check_name in self.skip_checks:
                print(f"\n--- skipping {check_name}")
                continue
            check_func()

        self.print_summary()
        return 0 if not self.failed_checks else 1


def main() -> int:
    parser = argparse.ArgumentParser(description="Run lifesim quality checks and tests")
    parser.add_argument(
        "--fix",
        action="store_true",
        help="Let black and isort rewrite files instead of only checking",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Stream tool output instead of showing it only on failure",
    )
    parser.add_argument(
        "--skip",
        nargs="+",
        default=[],
        help="Checks to skip (formatting, imports, lint, type, deadcode, complexity, tests)",
    )
    args = parser.parse_args()

    runner = CheckRunner(fix=args.fix, verbose=args.verbose, skip_checks=args.skip)
    return runner.run_all()


if __name__ == "__main__":
    sys.exit(main())
