"""
OBJDIST - Pairwise Centroid Distances

Reduces every object point file in a directory to its centroid and writes
the distance between every pair of objects with different object ids.

Usage:
    from objdist import run

    result = run()
    result = run(RunConfig(input_dir="scans/", output_path="distances.data"))

Output line:
    <label1> <object1> <label2> <object2> <distance>
"""

__version__ = "0.1.0"

from objdist.config.loader import RunConfig
from objdist.core.types import DistanceRecord, ObjectRecord, Point
from objdist.engines.centroid import compute_centroid
from objdist.engines.distance_matrix import build_matrix
from objdist.pipeline import RunResult, run

__all__ = [
    "__version__",
    "RunConfig",
    "RunResult",
    "DistanceRecord",
    "ObjectRecord",
    "Point",
    "compute_centroid",
    "build_matrix",
    "run",
]
