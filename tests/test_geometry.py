"""Tests for geometric primitives."""

import pytest

from kover.models.geometry import Extent


def _box(left, right, bottom, top):
    return Extent(left=left, right=right, bottom=bottom, top=top)


class TestExtent:
    def test_around(self):
        e = Extent.around(3, -2, 2, 1)
        assert (e.left, e.right, e.bottom, e.top) == (1, 5, -3, -1)

    def test_inverted_bounds_rejected(self):
        with pytest.raises(ValueError, match="left <= right"):
            _box(2, 1, 0, 1)

    def test_frozen(self):
        e = _box(0, 1, 0, 1)
        with pytest.raises(ValueError):
            e.left = 5

    def test_union(self):
        u = _box(0, 2, 0, 2).union(_box(-1, 1, 3, 4))
        assert u == _box(-1, 2, 0, 4)


class TestOverlap:
    def test_overlapping(self):
        a = Extent.around(0, 0, 2, 2)
        b = Extent.around(3, 0, 2, 2)
        assert a.overlaps(b)

    def test_edge_touching_is_not_overlap(self):
        """x in [0,2] and x in [2,4] share only an edge."""
        a = _box(0, 2, 0, 2)
        b = _box(2, 4, 0, 2)
        assert not a.overlaps(b)
        assert not b.overlaps(a)

    def test_vertical_edge_touching(self):
        assert not _box(0, 2, 0, 2).overlaps(_box(0, 2, 2, 5))

    def test_corner_touching(self):
        assert not _box(0, 2, 0, 2).overlaps(_box(2, 4, 2, 4))

    def test_containment(self):
        assert _box(-10, 10, -10, 10).overlaps(_box(-1, 1, -1, 1))

    def test_identical(self):
        e = _box(0, 1, 0, 1)
        assert e.overlaps(e)

    def test_disjoint(self):
        assert not _box(0, 1, 0, 1).overlaps(_box(5, 6, 5, 6))

    def test_cross_shape(self):
        """A wide flat box and a tall thin one crossing in the middle."""
        assert _box(-5, 5, -1, 1).overlaps(_box(-1, 1, -5, 5))

    @pytest.mark.parametrize(
        "a, b",
        [
            ((0, 2, 0, 2), (1, 3, 1, 3)),
            ((0, 2, 0, 2), (2, 4, 0, 2)),
            ((0, 4, 0, 1), (1, 2, -3, 3)),
            ((0, 1, 0, 1), (3, 4, 0, 1)),
            ((-3, -1, -3, -1), (-2, 0, -5, -2)),
        ],
    )
    def test_symmetric(self, a, b):
        ea, eb = _box(*a), _box(*b)
        assert ea.overlaps(eb) == eb.overlaps(ea)
