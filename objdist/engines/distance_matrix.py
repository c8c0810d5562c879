"""
OBJDIST Distance Matrix Engine
==============================

Euclidean distances between object centroids.

Every ordered pair (a, b) of the collection is visited, outer loop then
inner loop, and skipped only when a.object_id == b.object_id. Both (a, b)
and (b, a) are emitted, so n objects with distinct ids give n(n-1) records.

Distances are computed in float64 from the float32 centroids and narrowed
back to float32. Non-finite centroids give non-finite distances; nothing
is filtered.
"""

from typing import Iterator, Sequence

import numpy as np
from scipy.spatial.distance import cdist

from objdist.core.types import DistanceRecord, ObjectRecord


def centroid_array(objects: Sequence[ObjectRecord]) -> np.ndarray:
    """Stack centroids into an (n, 3) float64 array."""
    return np.asarray(
        [obj.centroid for obj in objects], dtype=np.float64
    ).reshape(-1, 3)


def build_matrix(objects: Sequence[ObjectRecord]) -> Iterator[DistanceRecord]:
    """
    Lazily yield one DistanceRecord per ordered pair of distinct object ids.

    Distances for one outer object are computed together; records are
    yielded one at a time so a writer can flush each line as it comes.

    Args:
        objects: Object collection in enumeration order

    Yields:
        DistanceRecord in outer/inner iteration order
    """
    centroids = centroid_array(objects)

    for i, first in enumerate(objects):
        with np.errstate(invalid='ignore', over='ignore'):
            diff = centroids - centroids[i]
            row = np.sqrt(np.sum(diff * diff, axis=1)).astype(np.float32)

        for j, second in enumerate(objects):
            if first.object_id == second.object_id:
                continue
            yield DistanceRecord(
                label1=first.label,
                object_id1=first.object_id,
                label2=second.label,
                object_id2=second.object_id,
                distance=row[j],
            )


def pair_count(objects: Sequence[ObjectRecord]) -> int:
    """Number of records build_matrix would yield, without computing distances."""
    counts = {}
    for obj in objects:
        counts[obj.object_id] = counts.get(obj.object_id, 0) + 1

    n = len(objects)
    same_id_pairs = sum(c * c for c in counts.values())
    return n * n - same_id_pairs


def distance_array(objects: Sequence[ObjectRecord]) -> np.ndarray:
    """
    Dense (n, n) float32 distance matrix.

    Cells whose two objects share an object id (the diagonal included) are
    NaN, matching the pairs build_matrix skips.
    """
    centroids = centroid_array(objects)
    if len(centroids) == 0:
        return np.zeros((0, 0), dtype=np.float32)

    with np.errstate(invalid='ignore', over='ignore'):
        matrix = cdist(centroids, centroids, metric='euclidean').astype(np.float32)

    ids = np.asarray([obj.object_id for obj in objects])
    matrix[ids[:, None] == ids[None, :]] = np.nan
    return matrix
