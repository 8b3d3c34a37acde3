import argparse
from pathlib import Path

from pydantic import ValidationError

from calibration import __version__
from calibration.config.settings import Settings
from calibration.logging.logger import Log
from calibration.processor.aggregator import Aggregator
from calibration.processor.exceptions import InputFileError
from calibration.processor.line_reader import LineReader
from calibration.processor.reporter import Reporter


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="calibration-sum",
        description="Sum the calibration values (first and last digit, literal or spelled) of a text file.",
    )
    p.add_argument("-f", "--file", required=True, type=Path, help="Input file, one record per line.")
    p.add_argument(
        "--report-interval",
        type=float,
        default=None,
        help="Seconds between progress reports. Overrides REPORT_INTERVAL_SECONDS.",
    )
    p.add_argument(
        "--encoding",
        default=None,
        help="Input text encoding. Overrides INPUT_ENCODING.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def _load_settings(args: argparse.Namespace) -> Settings:
    overrides: dict[str, object] = {}
    if args.report_interval is not None:
        overrides["report_interval_seconds"] = args.report_interval
    if args.encoding is not None:
        overrides["input_encoding"] = args.encoding
    return Settings(**overrides)


def _describe_invalid_settings(exc: ValidationError) -> str:
    problems = [
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    ]
    return "invalid settings: " + "; ".join(problems)


def main(argv: list[str] | None = None) -> int:
    """Entry point: parse args -> load settings -> aggregate the file."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    try:
        settings = _load_settings(args)
    except ValidationError as exc:
        parser.error(_describe_invalid_settings(exc))
    Log.configure(settings.log_level)

    reader = LineReader(args.file, encoding=settings.input_encoding)
    aggregator = Aggregator(
        Reporter(),
        report_interval_seconds=settings.report_interval_seconds,
    )
    try:
        aggregator.run(reader, source=str(reader.path))
    except InputFileError as exc:
        Log.error(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
