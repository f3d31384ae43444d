#!/usr/bin/env python3
"""
Test Runner for the Crop Advisor Dashboard
==========================================

Usage:
    python run_tests.py                      # full suite with coverage
    python run_tests.py soil weather         # tests/test_soil_agent.py, tests/test_weather_agent.py
    python run_tests.py test_narration.py    # a single test module
    python run_tests.py --no-cov -k cancel   # extra pytest filter, no coverage
"""

import argparse
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent
TESTS_DIR = PROJECT_ROOT / "tests"


def ensure_test_dependencies():
    """Install the project's test extra when pytest or pytest-cov is missing."""
    try:
        import pytest  # noqa: F401
        import pytest_cov  # noqa: F401
    except ImportError:
        print("Installing test dependencies (.[test])...")
        subprocess.check_call([sys.executable, "-m", "pip", "install", "-e", ".[test]"], cwd=PROJECT_ROOT)


def resolve_target(target):
    """Map a shorthand ("soil", "narration") or file name to a test module path."""
    candidates = [target] if target.endswith(".py") else [f"test_{target}_agent.py", f"test_{target}.py"]
    for name in candidates:
        path = TESTS_DIR / name
        if path.exists():
            return str(path.relative_to(PROJECT_ROOT))
    raise FileNotFoundError(f"No test module for '{target}' (tried {', '.join(candidates)})")


def build_command(paths, coverage=True, keyword=None):
    cmd = [sys.executable, "-m", "pytest", *paths, "-v", "--tb=short", "--strict-markers"]
    if coverage:
        cmd.extend(["--cov=src", "--cov-report=term-missing"])
    if keyword:
        cmd.extend(["-k", keyword])
    return cmd


def main():
    parser = argparse.ArgumentParser(description="Run the crop advisor test suite")
    parser.add_argument("targets", nargs="*", help="agent shorthand or test file name")
    parser.add_argument("--no-cov", action="store_true", help="skip coverage reporting")
    parser.add_argument("-k", dest="keyword", help="pytest keyword expression")
    args = parser.parse_args()

    print("🌾 Crop Advisor Dashboard Test Runner")
    print("=" * 40)

    ensure_test_dependencies()

    try:
        paths = [resolve_target(target) for target in args.targets]
    except FileNotFoundError as e:
        print(f"❌ {e}")
        sys.exit(1)

    cmd = build_command(paths, coverage=not args.no_cov, keyword=args.keyword)
    print(f"Running: {' '.join(cmd)}")
    result = subprocess.run(cmd, cwd=PROJECT_ROOT)

    if result.returncode == 0:
        print("✅ All tests passed!")
    else:
        print("❌ Some tests failed!")
    sys.exit(result.returncode)


if __name__ == "__main__":
    main()
