"""
OBJDIST Output

    text.py    - the distance file (recreated each run, flushed per line)
    parquet.py - optional parquet export of the same records
"""

from objdist.output.text import DistanceWriter, format_record, write_distances
from objdist.output.parquet import distances_frame, read_distances, write_parquet

__all__ = [
    'DistanceWriter',
    'format_record',
    'write_distances',
    'distances_frame',
    'read_distances',
    'write_parquet',
]
