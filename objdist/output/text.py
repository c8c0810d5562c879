"""
OBJDIST Text Output - Distance File

One line per distance record:

    <label1> <object1> <label2> <object2> <distance>\\n

The file is removed and recreated at the start of every run, and each line
is flushed as soon as it is written. Write errors are not caught.
"""

import os
from pathlib import Path
from typing import Iterable, Optional, TextIO, Union

from objdist.core.types import DistanceRecord
from objdist.utils import format_number

OUTPUT_FILE_MODE = 0o600


def format_record(record: DistanceRecord) -> str:
    """Render one distance record as an output line (newline included)."""
    fields = (
        record.label1,
        record.object_id1,
        record.label2,
        record.object_id2,
        record.distance,
    )
    return " ".join(format_number(v) for v in fields) + "\n"


class DistanceWriter:
    """
    Scoped owner of the distance output file.

    Usage:
        with DistanceWriter("/tmp/distances.data") as writer:
            for record in build_matrix(objects):
                writer.write(record)
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self.lines_written = 0
        self._file: Optional[TextIO] = None

    def __enter__(self) -> "DistanceWriter":
        self.path.unlink(missing_ok=True)
        fd = os.open(self.path, os.O_CREAT | os.O_APPEND | os.O_WRONLY, OUTPUT_FILE_MODE)
        self._file = os.fdopen(fd, 'a', encoding='utf-8', newline='')
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def write(self, record: DistanceRecord) -> None:
        if self._file is None:
            raise RuntimeError(f"DistanceWriter for {self.path} is not open")
        self._file.write(format_record(record))
        self._file.flush()
        self.lines_written += 1

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None


def write_distances(records: Iterable[DistanceRecord], path: Union[str, Path]) -> int:
    """
    Write records to path, replacing any previous file.

    Returns:
        Number of lines written
    """
    with DistanceWriter(path) as writer:
        for record in records:
            writer.write(record)
    return writer.lines_written
