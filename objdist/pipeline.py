"""
OBJDIST Pipeline - Main Entry Point

Usage:
    from objdist import run, RunConfig

    result = run()                                   # /tmp/objects/ -> /tmp/distances.data
    result = run(RunConfig(input_dir="scans/", output_path="out/distances.data"))

Steps:
    1. List the object directory and build one ObjectRecord per file
    2. Recreate the distance file
    3. Stream every pairwise distance record into it
    4. Optionally export the same records to parquet
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from objdist.config.loader import RunConfig
from objdist.core.types import ObjectRecord
from objdist.engines.distance_matrix import build_matrix
from objdist.engines.grouping import label_summary
from objdist.intake.reader import load_objects
from objdist.output.parquet import write_parquet
from objdist.output.text import DistanceWriter

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """Result container for one distance run."""
    objects: List[ObjectRecord]
    records_written: int
    output_path: Path
    parquet_path: Optional[Path] = None
    labels: Dict[str, Any] = field(default_factory=dict)

    def summary(self) -> Dict[str, Any]:
        return {
            'objects': len(self.objects),
            'records': self.records_written,
            'max_label': self.labels.get('max_label', 0),
            'output': str(self.output_path),
            'parquet': str(self.parquet_path) if self.parquet_path else None,
        }


def run(config: Optional[RunConfig] = None) -> RunResult:
    """
    Run the full centroid + distance pipeline.

    Args:
        config: Run configuration (defaults when omitted)

    Returns:
        RunResult

    Raises:
        InputError: input directory or an input file could not be read
        OSError: the output file could not be created or written
    """
    config = config or RunConfig()

    objects = load_objects(config)
    labels = label_summary(objects)

    with DistanceWriter(config.output_path) as writer:
        for record in build_matrix(objects):
            writer.write(record)

    logger.info(f"Wrote {writer.lines_written} distance records to {config.output_path}")

    parquet_path = None
    if config.parquet_path is not None:
        parquet_path = write_parquet(build_matrix(objects), config.parquet_path)
        logger.info(f"Wrote parquet export to {parquet_path}")

    return RunResult(
        objects=objects,
        records_written=writer.lines_written,
        output_path=config.output_path,
        parquet_path=parquet_path,
        labels=labels,
    )
