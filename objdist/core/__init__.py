from objdist.core.types import Centroid, DistanceRecord, ObjectRecord, Point

__all__ = [
    'Centroid',
    'DistanceRecord',
    'ObjectRecord',
    'Point',
]
