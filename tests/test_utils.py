import numpy
import pytest

from encdisk.utils import pmap, smallest_enclosing_disks
from encdisk.welzl import smallest_enclosing_disk


@pytest.fixture
def point_sets():
    rng = numpy.random.default_rng(0)
    sets = [[tuple(p) for p in rng.uniform(size=(n, 2)).tolist()]
            for n in range(12)]
    return sets + [[(0., 0.), (1., 0.), (1., 0.)], []]


def test_pmap_serial():
    double = pmap(lambda x, factor=2: factor * x)
    assert double([1, 2, 3]) == [2, 4, 6]
    assert double([1, 2, 3], 3) == [3, 6, 9]
    assert double([1, 2, 3], factor=-1) == [-1, -2, -3]


def test_pmap_invalid():
    identity = pmap(lambda x: x)
    with pytest.raises(ValueError):
        identity([1], n_jobs=0)
    with pytest.raises(ValueError):
        identity([1], chunk_size=0)


def test_smallest_enclosing_disks(point_sets):
    expected = [smallest_enclosing_disk(points) for points in point_sets]
    res = smallest_enclosing_disks(point_sets)
    assert len(res) == len(expected)
    for disk, exp in zip(res, expected):
        assert type(disk) is type(exp)
        assert disk.equals(exp)


def test_smallest_enclosing_disks_parallel(point_sets):
    expected = smallest_enclosing_disks(point_sets)
    res = smallest_enclosing_disks(point_sets, n_jobs=2, chunk_size=3)
    assert len(res) == len(expected)
    for disk, exp in zip(res, expected):
        assert type(disk) is type(exp)
        assert disk.support == exp.support
