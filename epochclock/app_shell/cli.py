import argparse
import json
import logging
import sys
from pathlib import Path

from epochclock.adapters.bitcoin import BitcoinDecodeError, locktime_from_tx, timestamp_from_header
from epochclock.components.config import ConfigModel
from epochclock.components.epoch import (
    ComputeBatchInput,
    ComputeEpochInput,
    EpochOutput,
    run_batch,
    run_compute,
)
from epochclock.domain.errors import (
    ConfigLoadError,
    ConfigValidationFailed,
    EpochClockError,
    ErrorKind,
)
from epochclock.rules.loader import config_checksum, load_config

logger = logging.getLogger("cli")

CONFIG_PATH = "epochclock.json"

EXIT_OK = 0
EXIT_LOAD_ERROR = 1
EXIT_DECODE_ERROR = 40

EXIT_CODES = {
    ErrorKind.INVALID_PROTOCOL: 10,
    ErrorKind.INVALID_VERSION: 11,
    ErrorKind.INVALID_GENESIS: 12,
    ErrorKind.INVALID_INTERVAL: 13,
    ErrorKind.TIMESTAMP_BEFORE_GENESIS: 20,
    ErrorKind.ARITHMETIC_OVERFLOW: 30,
}


class CommandFailed(Exception):
    """Stops a command with the given exit status."""

    def __init__(self, exit_code: int) -> None:
        super().__init__(exit_code)
        self.exit_code = exit_code


def report_errors(errors: list[EpochClockError]) -> int:
    """Print each error and return the exit status of the first."""
    for error in errors:
        print(f"error: {error}", file=sys.stderr)
    return EXIT_CODES[errors[0].kind]


def get_config(path: Path) -> ConfigModel:
    try:
        return load_config(path)
    except (FileNotFoundError, ConfigLoadError) as e:
        logger.error(str(e))
        raise CommandFailed(EXIT_LOAD_ERROR) from e
    except ConfigValidationFailed as e:
        raise CommandFailed(report_errors(e.errors)) from e


def resolve_reference(args: argparse.Namespace) -> int:
    if args.reference is not None:
        return args.reference

    try:
        if args.header is not None:
            return timestamp_from_header(args.header)
        return locktime_from_tx(args.tx)
    except BitcoinDecodeError as e:
        print(f"error: {e}", file=sys.stderr)
        raise CommandFailed(EXIT_DECODE_ERROR) from e


def format_output(output: EpochOutput) -> str:
    lines = [
        f"epoch: {output.epoch}",
        f"reference_timestamp: {output.reference_timestamp}",
    ]
    if output.window_start is not None:
        lines.append(f"window: [{output.window_start}, {output.window_end})")
    return "\n".join(lines)


def output_to_dict(output: EpochOutput) -> dict[str, int | None]:
    return {
        "epoch": output.epoch,
        "reference_timestamp": output.reference_timestamp,
        "window_start": output.window_start,
        "window_end": output.window_end,
    }


def handle_compute(args: argparse.Namespace) -> int:
    config = get_config(Path(args.config))
    reference = resolve_reference(args)

    output = run_compute(ComputeEpochInput(config=config, reference_timestamp=reference))
    if not output.success:
        return report_errors(output.errors)

    if args.json:
        print(json.dumps(output_to_dict(output)))
    else:
        print(format_output(output))
    return EXIT_OK


def handle_batch(args: argparse.Namespace) -> int:
    config = get_config(Path(args.config))
    batch = run_batch(ComputeBatchInput(config=config, reference_timestamps=args.references))

    exit_code = EXIT_OK
    for result in batch.results:
        if result.success:
            print(f"{result.reference_timestamp} {result.epoch}")
            continue
        error = result.errors[0]
        print(f"{result.reference_timestamp} error: {error}", file=sys.stderr)
        if exit_code == EXIT_OK:
            exit_code = EXIT_CODES[error.kind]
    return exit_code


def handle_validate(args: argparse.Namespace) -> int:
    config = get_config(Path(args.config))
    print(
        f"Config valid: protocol={config.protocol} version={config.version} "
        f"genesis={config.genesis_timestamp} interval={config.epoch_interval_seconds}s"
    )
    return EXIT_OK


def handle_checksum(args: argparse.Namespace) -> int:
    path = Path(args.config)
    try:
        digest = config_checksum(path)
    except (FileNotFoundError, ConfigLoadError) as e:
        logger.error(str(e))
        return EXIT_LOAD_ERROR
    print(f"{digest}  {path}")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="epochclock - Bitcoin timestamp epoch calculator")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # compute
    compute_parser = subparsers.add_parser("compute", help="Compute the epoch of a timestamp")
    compute_parser.add_argument("--config", default=CONFIG_PATH, help="Path to config file")
    source = compute_parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--reference", type=int, help="Reference UNIX timestamp")
    source.add_argument("--header", help="Raw 80-byte block header (hex); uses its nTime")
    source.add_argument("--tx", help="Raw transaction (hex); uses its nLockTime")
    compute_parser.add_argument("--json", action="store_true", help="Print JSON output")

    # batch
    batch_parser = subparsers.add_parser("batch", help="Compute epochs for many timestamps")
    batch_parser.add_argument("--config", default=CONFIG_PATH, help="Path to config file")
    batch_parser.add_argument("references", type=int, nargs="+", help="Reference UNIX timestamps")

    # validate
    validate_parser = subparsers.add_parser("validate", help="Validate the config file")
    validate_parser.add_argument("--config", default=CONFIG_PATH, help="Path to config file")

    # checksum
    checksum_parser = subparsers.add_parser("checksum", help="Print SHA-256 of the config file")
    checksum_parser.add_argument("--config", default=CONFIG_PATH, help="Path to config file")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    handlers = {
        "compute": handle_compute,
        "batch": handle_batch,
        "validate": handle_validate,
        "checksum": handle_checksum,
    }

    try:
        return handlers[args.command](args)
    except CommandFailed as e:
        return e.exit_code


if __name__ == "__main__":
    sys.exit(main())
