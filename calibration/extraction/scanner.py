"""Directional digit scans over a single line.

``find`` walks left to right and ``r_find`` right to left. Each returns the
nearest digit it meets, literal or spelled, and the position where it stopped.
The forward boundary is handed to ``r_find`` as its lower bound.
"""

from dataclasses import dataclass

from calibration.extraction.digits import (
    BACKWARD_DIGIT_WORDS,
    FORWARD_DIGIT_WORDS,
    PROBE_LENGTH,
)

ASCII_DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class ScanResult:
    """Outcome of one directional scan."""

    digit: str | None
    boundary: int


def find(line: str) -> ScanResult:
    """Return the leftmost digit of ``line``.

    On a literal digit the boundary is its index; on a word it is the index
    where the word starts. Without a match the boundary is ``len(line)``.
    """
    line_length = len(line)
    for pos in range(line_length):
        if line[pos] in ASCII_DIGITS:
            return ScanResult(line[pos], pos)

        rest = line_length - pos
        if rest < PROBE_LENGTH:
            continue

        window = line[pos : pos + PROBE_LENGTH]
        for entry in FORWARD_DIGIT_WORDS:
            if window == entry.probe:
                length = len(entry.word)
                if rest >= length and line[pos : pos + length] == entry.word:
                    return ScanResult(entry.digit, pos)
                # probes are unique, no other entry can match here
                break

    return ScanResult(None, line_length)


def r_find(line: str, found_pos: int) -> ScanResult:
    """Return the rightmost digit of ``line`` not left of ``found_pos``.

    ``pos`` is an end-exclusive boundary: a literal digit is reported with the
    boundary just after it, a word with the index where the word starts.
    Without a match the boundary is where the scan stopped.
    """
    pos = len(line)
    while pos > found_pos:
        if line[pos - 1] in ASCII_DIGITS:
            return ScanResult(line[pos - 1], pos)

        if pos < PROBE_LENGTH:
            pos -= 1
            continue

        window = line[pos - PROBE_LENGTH : pos]
        for entry in BACKWARD_DIGIT_WORDS:
            if window == entry.probe:
                length = len(entry.word)
                if pos >= length and line[pos - length : pos] == entry.word:
                    return ScanResult(entry.digit, pos - length)
                break

        pos -= 1

    return ScanResult(None, pos)
