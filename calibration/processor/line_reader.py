from collections.abc import Iterator
from pathlib import Path

from calibration.processor.exceptions import InputFileError
from calibration.processor.models import LineRecord


class LineReader:
    """Reads a text file line by line, decoding every line on its own.

    A line that fails to decode is yielded as a record carrying the error so
    that the rest of the file can still be processed.
    """

    def __init__(self, path: Path, encoding: str = "utf-8") -> None:
        self._path = path
        self._encoding = encoding

    @property
    def path(self) -> Path:
        return self._path

    def __iter__(self) -> Iterator[LineRecord]:
        """Yield records in file order.

        Raises:
            InputFileError: if the file cannot be opened.
        """
        try:
            handle = self._path.open("rb")
        except OSError as exc:
            raise InputFileError(self._path, exc) from exc

        with handle:
            for number, raw in enumerate(handle):
                yield self._decode(number, raw)

    def _decode(self, number: int, raw: bytes) -> LineRecord:
        if raw.endswith(b"\n"):
            raw = raw[:-1]
            if raw.endswith(b"\r"):
                raw = raw[:-1]
        try:
            return LineRecord(number=number, text=raw.decode(self._encoding))
        except UnicodeDecodeError as exc:
            return LineRecord(number=number, text=None, error=exc)
