import sys
from typing import TextIO

from calibration.processor.models import RunReport


def format_report(report: RunReport) -> str:
    """Render a report as one human-readable line."""
    line = (
        f"{report.timestamp.isoformat()} Parsed lines: {report.parsed_lines}, "
        f"Incorrect lines {report.incorrect_lines}, Total amount: {report.total_sum}"
    )
    if report.elapsed is not None:
        line += f", Elapsed {report.elapsed.total_seconds():.3f}s"
    return line


class Reporter:
    """Writes progress and final reports to an output stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout

    def progress(self, report: RunReport) -> None:
        self._write(format_report(report))

    def final(self, report: RunReport) -> None:
        self._write(format_report(report))
        self._write("")
        self._write(f"Total amount: {report.total_sum}")

    def _write(self, line: str) -> None:
        self._stream.write(line + "\n")
        self._stream.flush()
