#!/usr/bin/env python
"""
BigNum Calculator - Main Entry Point

Usage:
    bignum-calc                          # demo, then interactive mode
    bignum-calc --no-demo                # interactive mode only
    bignum-calc --demo-only              # demo only
    bignum-calc --eval pow 2 10 1000     # one operation, print the result

Returns:
    0: Success
    1: The --eval operation failed
"""

import argparse
import sys
from typing import List, Optional

from .exceptions import BigNumError
from .logging_config import get_logger, setup_logging
from .shell.calculator import Calculator, available_operations, evaluate
from .shell.demo import demonstrate

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bignum-calc",
        description="BigNum Library for Public Key Cryptosystems",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--no-demo", action="store_true", help="Skip the demonstration")
    mode.add_argument("--demo-only", action="store_true", help="Run the demonstration and exit")
    mode.add_argument(
        "--eval",
        nargs="+",
        metavar="ARG",
        help="Evaluate one operation and exit (operations: %s)" % available_operations().replace("%", "%%"),
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: WARNING)",
    )
    parser.add_argument("--log-file", default=None, help="Also write the log to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the BigNum calculator."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, log_file=args.log_file)

    if args.eval:
        operation, operands = args.eval[0], args.eval[1:]
        try:
            print(evaluate(operation, *operands))
        except BigNumError as e:
            logger.error("eval failed", extra={'operation': operation})
            print(f"Error: {e.message}", file=sys.stderr)
            return 1
        return 0

    print("BigNum Library for Public Key Cryptosystems")
    print("=" * 43)

    if not args.no_demo:
        demonstrate()

    if args.demo_only:
        return 0

    Calculator().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
