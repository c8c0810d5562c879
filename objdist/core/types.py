"""
Core record types shared by intake, engines and output.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np


Centroid = Tuple[np.float32, np.float32, np.float32]


@dataclass
class Point:
    """One sample point parsed from a line. Lives only until accumulated."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)


@dataclass(frozen=True)
class ObjectRecord:
    """
    One object's identifiers and centroid.

    source is the filename the record was built from; it is kept for
    diagnostics only and never written to the distance output.
    """
    label: int
    object_id: int
    centroid: Centroid
    source: Optional[str] = None


@dataclass(frozen=True)
class DistanceRecord:
    """Distance between two objects' centroids, in emission order."""
    label1: int
    object_id1: int
    label2: int
    object_id2: int
    distance: np.float32
