"""
Tests for objdist.engines.distance_matrix
=========================================

Validates pairwise distance emission:
    - same object id pairs are skipped (by id, not by position)
    - both orders of every pair are emitted with equal distances
    - n distinct ids -> n(n-1) records, in outer/inner order
    - known 3-4-5 distance
"""

import itertools

import numpy as np
import pytest

from objdist.core.types import ObjectRecord
from objdist.engines.distance_matrix import (
    build_matrix,
    centroid_array,
    distance_array,
    pair_count,
)


def _obj(label, object_id, x, y, z):
    return ObjectRecord(
        label=label,
        object_id=object_id,
        centroid=(np.float32(x), np.float32(y), np.float32(z)),
    )


@pytest.fixture
def random_objects():
    rng = np.random.RandomState(42)
    return [
        _obj(label=i % 3, object_id=i, x=rng.randn(), y=rng.randn(), z=rng.randn())
        for i in range(6)
    ]


class TestBuildMatrix:

    def test_known_distance(self):
        a = _obj(1, 1, 0, 0, 0)
        b = _obj(1, 2, 3, 4, 0)
        records = list(build_matrix([a, b]))
        assert len(records) == 2
        assert records[0].distance == np.float32(5.0)
        assert records[1].distance == np.float32(5.0)

    def test_same_object_id_skipped(self):
        a = _obj(1, 7, 0, 0, 0)
        b = _obj(2, 7, 1, 1, 1)
        assert list(build_matrix([a, b])) == []

    def test_duplicates_skip_only_matching_ids(self):
        a = _obj(1, 7, 0, 0, 0)
        b = _obj(2, 7, 1, 1, 1)
        c = _obj(3, 8, 2, 2, 2)
        records = list(build_matrix([a, b, c]))
        pairs = [(r.label1, r.label2) for r in records]
        assert pairs == [(1, 3), (2, 3), (3, 1), (3, 2)]

    def test_symmetry(self, random_objects):
        records = list(build_matrix(random_objects))
        by_pair = {(r.object_id1, r.object_id2): r.distance for r in records}
        for (i, j), d in by_pair.items():
            assert by_pair[(j, i)] == d

    def test_cardinality(self, random_objects):
        n = len(random_objects)
        records = list(build_matrix(random_objects))
        assert len(records) == n * (n - 1)
        assert pair_count(random_objects) == n * (n - 1)

    def test_emission_order(self, random_objects):
        records = list(build_matrix(random_objects))
        ids = [o.object_id for o in random_objects]
        expected = [(i, j) for i, j in itertools.product(ids, ids) if i != j]
        assert [(r.object_id1, r.object_id2) for r in records] == expected

    def test_distance_is_float32(self, random_objects):
        record = next(build_matrix(random_objects))
        assert isinstance(record.distance, np.float32)
        assert record.distance >= 0

    def test_is_lazy(self, random_objects):
        gen = build_matrix(random_objects)
        assert next(gen).object_id1 == random_objects[0].object_id

    def test_non_finite_centroid_propagates(self):
        a = _obj(0, 0, np.nan, np.nan, np.nan)
        b = _obj(0, 1, 1, 1, 1)
        c = _obj(0, 2, np.inf, 0, 0)
        records = list(build_matrix([a, b, c]))
        assert len(records) == 6
        assert np.isnan(records[0].distance)
        inf_to_b = [r for r in records if (r.object_id1, r.object_id2) == (2, 1)][0]
        assert np.isinf(inf_to_b.distance)

    def test_empty_collection(self):
        assert list(build_matrix([])) == []


class TestPairCount:

    def test_counts_shared_ids(self):
        objects = [_obj(0, 1, 0, 0, 0), _obj(0, 1, 0, 0, 0), _obj(0, 2, 0, 0, 0)]
        assert pair_count(objects) == len(list(build_matrix(objects))) == 4


class TestDistanceArray:

    def test_matches_records(self, random_objects):
        matrix = distance_array(random_objects)
        assert matrix.shape == (6, 6)
        assert matrix.dtype == np.float32
        for r in build_matrix(random_objects):
            np.testing.assert_allclose(matrix[r.object_id1, r.object_id2], r.distance, rtol=1e-6)

    def test_same_ids_are_nan(self, random_objects):
        matrix = distance_array(random_objects)
        assert np.all(np.isnan(np.diag(matrix)))

    def test_empty(self):
        assert distance_array([]).shape == (0, 0)
        assert centroid_array([]).shape == (0, 3)
