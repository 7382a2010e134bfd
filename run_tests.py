#!/usr/bin/env python3
"""
Test runner for flexilog.
Provides categorized test execution with slow test management.

Usage:
    python run_tests.py             # Run fast unit tests only (default)
    python run_tests.py --all       # Run all tests including slow ones
    python run_tests.py --slow      # Show information about slow tests
    python run_tests.py --list      # List available test modules
    python run_tests.py --coverage  # Run with coverage report
"""

import sys
import subprocess
import argparse
from pathlib import Path


def run_tests(include_slow=False, verbose=True, coverage=False):
    """
    Run pytest with appropriate configuration.

    Args:
        include_slow: Whether to include slow-marked tests.
        verbose: Whether to show verbose output.
        coverage: Whether to run with coverage analysis.

    Returns:
        Exit code from pytest.
    """
    cmd = [
        sys.executable, "-m", "pytest",
        "tests/",
        "--tb=short",
        "--durations=10",
    ]

    if verbose:
        cmd.append("-v")

    if not include_slow:
        cmd.extend(["-m", "not slow"])

    if coverage:
        cmd.extend([
            "--cov=flexilog",
            "--cov-report=term-missing",
        ])

    print(f"Running: {' '.join(cmd)}")
    print("=" * 60)

    result = subprocess.run(cmd)
    return result.returncode


def show_slow_tests():
    """Display information about slow tests and test categories."""
    print("=" * 60)
    print("TEST CATEGORIES")
    print("=" * 60)
    print()
    print("  Fast (default):")
    print("    Unit tests for levels, spec parsing, directive matching,")
    print("    routing, formats, config, installation, tracing and CLI.")
    print("    Run with: python run_tests.py")
    print()
    print("  Slow (@pytest.mark.slow):")
    print("    Multi-threaded stress tests against the trace file sink.")
    print("    Run with: python run_tests.py --all")
    print()
    print("To run only slow tests directly:")
    print("  python -m pytest -m slow -v")
    print()


def list_tests():
    """List available test modules."""
    test_files = sorted(Path("tests").glob("test_*.py"))

    print()
    print("Available test modules:")
    print("-" * 40)
    for test_file in test_files:
        print(f"  {test_file.stem}")
    print("-" * 40)
    print()
    print("Run a specific module: python -m pytest tests/test_spec.py")


def main():
    """Main entry point for test runner."""
    parser = argparse.ArgumentParser(
        description="Test runner for flexilog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_tests.py             # Run fast tests only
  python run_tests.py --all       # Run all tests including slow
  python run_tests.py --coverage  # Run with coverage report
  python run_tests.py --list      # List test modules
  python run_tests.py --slow      # Show test category info
        """
    )

    parser.add_argument(
        "--all", action="store_true",
        help="Run all tests including slow ones"
    )
    parser.add_argument(
        "--slow", action="store_true",
        help="Show information about test categories"
    )
    parser.add_argument(
        "--coverage", action="store_true",
        help="Run tests with coverage analysis"
    )
    parser.add_argument(
        "--list", action="store_true",
        help="List available test modules"
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true",
        help="Less verbose output"
    )

    args = parser.parse_args()

    if args.slow:
        show_slow_tests()
        return 0

    if args.list:
        list_tests()
        return 0

    print("=" * 60)
    print("FLEXILOG TEST SUITE")
    print("=" * 60)

    if args.all:
        print("\nRunning ALL tests (including slow)...")
    else:
        print("\nRunning fast tests only (use --all for slow tests)...")

    print()
    exit_code = run_tests(
        include_slow=args.all,
        verbose=not args.quiet,
        coverage=args.coverage,
    )

    print()
    print("=" * 60)
    if exit_code == 0:
        print("SUCCESS: All tests passed!")
    else:
        print(f"FAILED: Tests failed with exit code {exit_code}")
    print("=" * 60)

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
