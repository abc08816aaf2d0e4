"""Command line entry point: ABI JSON file in, TypeScript definitions out"""

from __future__ import annotations

import argparse
import json
import sys
import time
from pathlib import Path

from .errors import AbiGenError
from .logging import configure_logging, get_logger
from .parser import ABIParser, extract_abi, is_compilation_output
from .typescript_generator import TypeScriptGenerator

logger = get_logger("cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="abigen",
        description="Generate TypeScript definitions from a Solidity ABI",
    )
    parser.add_argument("abi_file", nargs="?", help="Path to ABI or compilation output JSON (positional)")
    parser.add_argument("-f", "--abi", help="Path to ABI or compilation output JSON (alternative)")
    parser.add_argument(
        "-o", "--output",
        help="Output file name. Defaults to stdout. Will ALWAYS override",
    )
    parser.add_argument("--interface-name", default="SolidityContract", help="Name of the contract interface")
    parser.add_argument(
        "--response-type",
        default="TransactionResponse",
        help="Return type wrapped in Promise<> for state-changing functions",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors")
    parser.add_argument("--log-file", type=Path, help="Also write logs to this file")
    return parser


def generate_from_file(
    abi_path: Path,
    interface_name: str = "SolidityContract",
    response_type: str = "TransactionResponse",
) -> str:
    """Read an ABI or compilation output file and return its definitions"""
    document = json.loads(abi_path.read_text(encoding="utf-8"))
    if is_compilation_output(document):
        logger.info("The file is a compilation output file, processing accordingly")
    abi = ABIParser(extract_abi(document)).parse()
    return TypeScriptGenerator(abi, interface_name, response_type).generate()


def main(argv: list[str] | None = None) -> int:
    start_time = time.perf_counter()

    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose, quiet=args.quiet, log_file=args.log_file)

    # Support both positional and --abi argument
    abi_file = args.abi_file or args.abi
    if not abi_file:
        parser.error("ABI file is required (positional or --abi)")

    try:
        definitions = generate_from_file(Path(abi_file), args.interface_name, args.response_type)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.error("An error occurred while trying to parse the ABI file: %s", e)
        return 1
    except AbiGenError as e:
        logger.error("%s", e)
        return 1

    logger.info("Definitions generated successfully")
    if not args.output:
        sys.stdout.write(definitions)
    else:
        try:
            Path(args.output).write_text(definitions, encoding="utf-8")
        except OSError as e:
            logger.error("An error occurred while writing the file: %s", e)
            return 1
        logger.info("Generated: %s", args.output)

    elapsed = time.perf_counter() - start_time
    logger.debug("Generation completed in %.2f ms", elapsed * 1000)
    return 0


if __name__ == "__main__":
    sys.exit(main())
