#!/usr/bin/env python3
"""
Test runner script for PyFlowTex.

Shortcuts for the test suites: imports, unit, integration, or everything.
"""
import sys
import subprocess
import argparse


SUITES = {
    "imports": ("tests/test_imports.py", "Import tests"),
    "unit": ("tests/unit/", "Unit tests"),
    "integration": ("tests/integration/", "Integration tests"),
}


def run_suite(base_cmd, target, description):
    print(f"→ {description}")
    return subprocess.run(f"{base_cmd} {target}", shell=True).returncode == 0


def build_parser():
    parser = argparse.ArgumentParser(
        description="PyFlowTex test runner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_tests.py                    # imports + unit tests
  python run_tests.py unit               # one suite
  python run_tests.py all --coverage     # everything with coverage
  python run_tests.py unit -k blur       # forward a keyword filter
        """
    )
    parser.add_argument('suite', nargs='?', default='default',
                        choices=['default', 'all'] + list(SUITES),
                        help='Suite to run (default: imports + unit)')
    parser.add_argument('-k', dest='keyword', default=None,
                        help='Only run tests matching this pytest keyword expression')
    parser.add_argument('--fast', action='store_true',
                        help='Exclude tests marked slow')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Verbose output')
    parser.add_argument('--coverage', action='store_true',
                        help='Run with coverage report')
    return parser


def main():
    args = build_parser().parse_args()

    base_cmd = "PYTHONPATH=. python -m pytest --disable-warnings"
    base_cmd += " -v" if args.verbose else " -q"
    if args.coverage:
        base_cmd += " --cov=pyflowtex --cov-report=term"
    if args.fast:
        base_cmd += " -m 'not slow'"
    if args.keyword:
        base_cmd += f" -k '{args.keyword}'"

    if args.suite == 'all':
        names = list(SUITES)
    elif args.suite == 'default':
        names = ['imports', 'unit']
    else:
        names = [args.suite]

    success = True
    for name in names:
        target, description = SUITES[name]
        if not run_suite(base_cmd, target, description):
            success = False

    if success:
        print("\n✅ All tests passed!")
        return 0
    print("\n❌ Some tests failed!")
    return 1


if __name__ == '__main__':
    sys.exit(main())
