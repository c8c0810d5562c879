"""
OBJDIST Engines
===============

Pure computation over already-loaded data. No file or directory access.

    centroid.py        - point file text -> centroid
    distance_matrix.py - object collection -> pairwise distance records
    grouping.py        - label grouping and summaries
"""

from objdist.engines.centroid import compute_centroid, parse_coordinate, parse_point
from objdist.engines.distance_matrix import build_matrix, distance_array, pair_count
from objdist.engines.grouping import group_by_label, label_summary, max_label

__all__ = [
    'compute_centroid',
    'parse_coordinate',
    'parse_point',
    'build_matrix',
    'distance_array',
    'pair_count',
    'group_by_label',
    'label_summary',
    'max_label',
]
