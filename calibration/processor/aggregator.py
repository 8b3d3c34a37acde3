import time
from collections.abc import Callable, Iterable
from datetime import datetime, timedelta
from enum import Enum

from calibration.extraction.extractor import extract_number
from calibration.logging.logger import Log
from calibration.processor.models import LineRecord, RunReport, RunTotals
from calibration.processor.reporter import Reporter


def _local_now() -> datetime:
    return datetime.now().astimezone()


class RunState(str, Enum):
    START = "start"
    READING = "reading"
    DONE = "done"


class Aggregator:
    """Sums calibration values over a stream of lines.

    Lifecycle: start -> reading -> done. Broken, empty and digitless lines are
    counted and skipped; nothing a line contains can stop the run.
    """

    def __init__(
        self,
        reporter: Reporter,
        report_interval_seconds: float = 10.0,
        clock: Callable[[], float] = time.monotonic,
        wall_clock: Callable[[], datetime] = _local_now,
    ) -> None:
        self._reporter = reporter
        self._report_interval = report_interval_seconds
        self._clock = clock
        self._wall_clock = wall_clock
        self.state = RunState.START

    def run(self, lines: Iterable[LineRecord], source: str = "<input>") -> RunTotals:
        """Consume every line, emit progress while reading and a final report.

        Raises:
            InputFileError: propagated from the reader if the source cannot be opened.
        """
        totals = RunTotals()
        started_at = self._clock()
        last_report_at = started_at
        self.state = RunState.READING
        Log.info(f"Reading calibration document {source}")

        for record in lines:
            self._consume(record, totals, source)

            now = self._clock()
            if now - last_report_at > self._report_interval:
                last_report_at = now
                self._reporter.progress(RunReport.from_totals(totals, self._wall_clock()))

        self.state = RunState.DONE
        elapsed = timedelta(seconds=self._clock() - started_at)
        Log.info(
            f"Finished {source}: {totals.parsed_lines} lines, "
            f"{totals.incorrect_lines} incorrect"
        )
        self._reporter.final(RunReport.from_totals(totals, self._wall_clock(), elapsed))
        return totals

    def _consume(self, record: LineRecord, totals: RunTotals, source: str) -> None:
        totals.parsed_lines += 1

        if record.text is None:
            Log.warning(f"File {source} broken line(number {record.number}): {record.error}")
            return

        if not record.text:
            totals.incorrect_lines += 1
            return

        value = extract_number(record.text)
        if value is None:
            totals.incorrect_lines += 1
            if Log.debug_enabled():
                Log.debug(f"No calibration value in line {record.number}: {record.text!r}")
            return

        totals.total_sum += value
