from dataclasses import dataclass

from calibration.extraction.exceptions import DigitTableError

PROBE_LENGTH = 3


@dataclass(frozen=True)
class DigitWord:
    """A spelled-out digit together with the probe used to spot it."""

    probe: str  # first or last PROBE_LENGTH characters of word
    word: str
    digit: str  # "1".."9"


FORWARD_DIGIT_WORDS: tuple[DigitWord, ...] = (
    DigitWord("one", "one", "1"),
    DigitWord("two", "two", "2"),
    DigitWord("six", "six", "6"),
    DigitWord("fou", "four", "4"),
    DigitWord("fiv", "five", "5"),
    DigitWord("nin", "nine", "9"),
    DigitWord("sev", "seven", "7"),
    DigitWord("eig", "eight", "8"),
    DigitWord("thr", "three", "3"),
)

BACKWARD_DIGIT_WORDS: tuple[DigitWord, ...] = (
    DigitWord("one", "one", "1"),
    DigitWord("two", "two", "2"),
    DigitWord("six", "six", "6"),
    DigitWord("our", "four", "4"),
    DigitWord("ive", "five", "5"),
    DigitWord("ine", "nine", "9"),
    DigitWord("ven", "seven", "7"),
    DigitWord("ght", "eight", "8"),
    DigitWord("ree", "three", "3"),
)


def validate_digit_table(table: tuple[DigitWord, ...], *, from_end: bool) -> None:
    """Check that a table can be scanned with a single probe comparison per position.

    The scans stop at the first probe that matches, so every probe must be
    unique within its table and must be the word's prefix (or suffix when
    ``from_end`` is set).

    Raises:
        DigitTableError: on the first entry that breaks one of the rules.
    """
    seen: dict[str, DigitWord] = {}
    for entry in table:
        if len(entry.digit) != 1 or entry.digit not in "123456789":
            raise DigitTableError(f"'{entry.word}' maps to invalid digit '{entry.digit}'")
        if len(entry.probe) != PROBE_LENGTH:
            raise DigitTableError(
                f"probe '{entry.probe}' for '{entry.word}' is not {PROBE_LENGTH} characters"
            )
        edge = entry.word[-PROBE_LENGTH:] if from_end else entry.word[:PROBE_LENGTH]
        if entry.probe != edge:
            side = "suffix" if from_end else "prefix"
            raise DigitTableError(f"probe '{entry.probe}' is not the {side} of '{entry.word}'")
        clash = seen.get(entry.probe)
        if clash is not None:
            raise DigitTableError(
                f"probe '{entry.probe}' is shared by '{clash.word}' and '{entry.word}'"
            )
        seen[entry.probe] = entry


validate_digit_table(FORWARD_DIGIT_WORDS, from_end=False)
validate_digit_table(BACKWARD_DIGIT_WORDS, from_end=True)
