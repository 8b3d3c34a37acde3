from calibration.extraction.digits import (
    BACKWARD_DIGIT_WORDS,
    FORWARD_DIGIT_WORDS,
    DigitWord,
    validate_digit_table,
)
from calibration.extraction.extractor import extract_number
from calibration.extraction.scanner import ScanResult, find, r_find

__all__ = [
    "BACKWARD_DIGIT_WORDS",
    "DigitWord",
    "FORWARD_DIGIT_WORDS",
    "ScanResult",
    "extract_number",
    "find",
    "r_find",
    "validate_digit_table",
]
