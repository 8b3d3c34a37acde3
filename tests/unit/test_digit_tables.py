import pytest

from calibration.extraction.digits import (
    BACKWARD_DIGIT_WORDS,
    FORWARD_DIGIT_WORDS,
    PROBE_LENGTH,
    DigitWord,
    validate_digit_table,
)
from calibration.extraction.exceptions import DigitTableError, ExtractionError


class TestTablesContent:
    def test_nine_entries_each(self) -> None:
        assert len(FORWARD_DIGIT_WORDS) == 9
        assert len(BACKWARD_DIGIT_WORDS) == 9

    def test_cover_digits_one_to_nine(self) -> None:
        assert sorted(e.digit for e in FORWARD_DIGIT_WORDS) == list("123456789")
        assert sorted(e.digit for e in BACKWARD_DIGIT_WORDS) == list("123456789")

    def test_same_words_in_same_order(self) -> None:
        assert [e.word for e in FORWARD_DIGIT_WORDS] == [e.word for e in BACKWARD_DIGIT_WORDS]

    def test_forward_probes_are_prefixes(self) -> None:
        for entry in FORWARD_DIGIT_WORDS:
            assert entry.word.startswith(entry.probe)
            assert len(entry.probe) == PROBE_LENGTH

    def test_backward_probes_are_suffixes(self) -> None:
        for entry in BACKWARD_DIGIT_WORDS:
            assert entry.word.endswith(entry.probe)
            assert len(entry.probe) == PROBE_LENGTH

    def test_probes_are_unique(self) -> None:
        assert len({e.probe for e in FORWARD_DIGIT_WORDS}) == 9
        assert len({e.probe for e in BACKWARD_DIGIT_WORDS}) == 9

    def test_entries_are_immutable(self) -> None:
        with pytest.raises(AttributeError):
            FORWARD_DIGIT_WORDS[0].digit = "9"  # type: ignore[misc]


class TestValidateDigitTable:
    def test_accepts_shipped_tables(self) -> None:
        validate_digit_table(FORWARD_DIGIT_WORDS, from_end=False)
        validate_digit_table(BACKWARD_DIGIT_WORDS, from_end=True)

    def test_rejects_shared_probe(self) -> None:
        table = FORWARD_DIGIT_WORDS + (DigitWord("sev", "seventy", "7"),)

        with pytest.raises(DigitTableError, match="shared by 'seven' and 'seventy'"):
            validate_digit_table(table, from_end=False)

    def test_rejects_probe_that_is_not_prefix(self) -> None:
        table = (DigitWord("our", "four", "4"),)

        with pytest.raises(DigitTableError, match="not the prefix"):
            validate_digit_table(table, from_end=False)

    def test_rejects_probe_that_is_not_suffix(self) -> None:
        table = (DigitWord("fou", "four", "4"),)

        with pytest.raises(DigitTableError, match="not the suffix"):
            validate_digit_table(table, from_end=True)

    def test_rejects_wrong_probe_length(self) -> None:
        table = (DigitWord("fo", "four", "4"),)

        with pytest.raises(DigitTableError, match="not 3 characters"):
            validate_digit_table(table, from_end=False)

    def test_rejects_spelled_zero(self) -> None:
        table = (DigitWord("zer", "zero", "0"),)

        with pytest.raises(DigitTableError, match="invalid digit"):
            validate_digit_table(table, from_end=False)

    def test_error_is_extraction_error(self) -> None:
        assert issubclass(DigitTableError, ExtractionError)
