"""
OBJDIST Parquet Output - Tabular Distance Export

Optional companion to the text distance file for analysis tooling.
Same records, same order, one row per record.
"""

from pathlib import Path
from typing import Iterable, Union

import polars as pl

from objdist.core.types import DistanceRecord


DISTANCE_SCHEMA = {
    'label1': pl.Int64,
    'object1': pl.Int64,
    'label2': pl.Int64,
    'object2': pl.Int64,
    'distance': pl.Float32,
}


def distances_frame(records: Iterable[DistanceRecord]) -> pl.DataFrame:
    """Collect distance records into a DataFrame with DISTANCE_SCHEMA."""
    columns = {name: [] for name in DISTANCE_SCHEMA}

    for record in records:
        columns['label1'].append(record.label1)
        columns['object1'].append(record.object_id1)
        columns['label2'].append(record.label2)
        columns['object2'].append(record.object_id2)
        columns['distance'].append(float(record.distance))

    return pl.DataFrame(columns, schema=DISTANCE_SCHEMA)


def write_parquet(records: Iterable[DistanceRecord], path: Union[str, Path]) -> Path:
    """
    Write distance records to a parquet file.

    Args:
        records: Distance records
        path: Output parquet path (parent directories are created)

    Returns:
        Final path
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    df = distances_frame(records)

    # Write atomically (write to temp, then rename)
    temp_path = path.with_suffix('.tmp')
    df.write_parquet(temp_path)
    temp_path.replace(path)

    return path


def read_distances(path: Union[str, Path]) -> pl.DataFrame:
    """Read a parquet file written by write_parquet."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Output file not found: {path}")
    return pl.read_parquet(path)
