from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True)
class LineRecord:
    """One line of input, decoded or not."""

    number: int  # 0-based position in the file
    text: str | None
    error: UnicodeDecodeError | None = None


@dataclass
class RunTotals:
    """Counters owned by a single aggregation run."""

    parsed_lines: int = 0
    incorrect_lines: int = 0
    total_sum: int = 0


@dataclass(frozen=True)
class RunReport:
    """Snapshot of the counters at the moment a report is emitted."""

    timestamp: datetime
    parsed_lines: int
    incorrect_lines: int
    total_sum: int
    elapsed: timedelta | None = None

    @classmethod
    def from_totals(
        cls,
        totals: RunTotals,
        timestamp: datetime,
        elapsed: timedelta | None = None,
    ) -> "RunReport":
        return cls(
            timestamp=timestamp,
            parsed_lines=totals.parsed_lines,
            incorrect_lines=totals.incorrect_lines,
            total_sum=totals.total_sum,
            elapsed=elapsed,
        )
