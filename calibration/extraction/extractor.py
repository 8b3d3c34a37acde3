from calibration.extraction.scanner import find, r_find


def extract_number(line: str) -> int | None:
    """Combine the first and last digit of ``line`` into its calibration value.

    Returns None when either scan comes back empty.
    """
    first = find(line)
    last = r_find(line, first.boundary)
    if first.digit is None or last.digit is None:
        return None
    try:
        return int(first.digit + last.digit)
    except ValueError:
        return None
