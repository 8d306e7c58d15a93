"""
Test runner script for the game launcher.
"""

import sys
import subprocess
import argparse
from pathlib import Path


def run_tests(test_path="tests/", verbose=True, coverage=False, keyword=None):
    """Run the pytest suite with the given options."""
    cmd = [sys.executable, "-m", "pytest", test_path]

    if verbose:
        cmd.append("-v")

    if coverage:
        cmd.extend(["--cov=game_launcher", "--cov-report=term-missing"])

    if keyword:
        cmd.extend(["-k", keyword])

    cmd.extend(["--tb=short", "--strict-markers"])

    print(f"Running: {' '.join(cmd)}")
    return subprocess.run(cmd).returncode


def main():
    parser = argparse.ArgumentParser(description="Run game launcher tests")
    parser.add_argument("--path", default="tests/", help="Test path")
    parser.add_argument("--quiet", "-q", action="store_true", help="Quiet output")
    parser.add_argument("--coverage", "-c", action="store_true", help="Run with coverage (needs pytest-cov)")
    parser.add_argument("-k", dest="keyword", help="Only run tests matching this expression")

    args = parser.parse_args()

    if not Path(args.path).exists():
        print(f"Test path does not exist: {args.path}")
        return 1

    return run_tests(
        test_path=args.path,
        verbose=not args.quiet,
        coverage=args.coverage,
        keyword=args.keyword,
    )


if __name__ == "__main__":
    sys.exit(main())
