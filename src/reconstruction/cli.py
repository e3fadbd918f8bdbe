"""Command-line entry point.

Reads the input document, reconstructs every case and prints the secrets
newline-joined once all cases are processed. Diagnostics go to stderr.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from src.reconstruction.pipeline import (
    CASE_FAILURES,
    MalformedInputError,
    ReconstructionConfig,
    format_secrets,
    parse_input_document,
    reconstruct_secrets,
)

logger = logging.getLogger(__name__)

DEFAULT_INPUT_PATH = "input.json"

EXIT_OK = 0
EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lagrange-reconstruct",
        description="Reconstruct threshold secrets via exact Lagrange interpolation at zero.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=DEFAULT_INPUT_PATH,
        help=f"path to the JSON input document (default: {DEFAULT_INPUT_PATH})",
    )
    parser.add_argument(
        "--permissive-radix",
        action="store_true",
        help="accept digits >= base and bases outside [2, 36]",
    )
    parser.add_argument(
        "--isolate-failures",
        action="store_true",
        help="report a failing case and continue instead of aborting the run",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="stderr log level (default: WARNING)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = ReconstructionConfig(
        strict_radix=not args.permissive_radix,
        isolate_case_failures=args.isolate_failures,
    )

    try:
        text = Path(args.input).read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read input file %s: %s", args.input, e)
        return EXIT_FAILURE

    try:
        cases = parse_input_document(text)
        secrets = reconstruct_secrets(cases, config)
    except MalformedInputError as e:
        logger.error("%s", e)
        return EXIT_FAILURE
    except CASE_FAILURES as e:
        logger.error("Reconstruction aborted: %s", e)
        return EXIT_FAILURE

    print(format_secrets(secrets))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
