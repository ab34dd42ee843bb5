# Copyright (C) 2018 DataStorm
#
# This file is part of EnclosingDisk.
#
# EnclosingDisk is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# EnclosingDisk is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# A copy of the GNU General Public License is available in the LICENSE
# file or at <http://www.gnu.org/licenses/>.
import functools
import inspect
import logging
import multiprocessing

import toolz

from .predicates import DEFAULT
from .welzl import smallest_enclosing_disk_with

logger = logging.getLogger(__name__)


def _map_chunk(fnc, kwargs, chunk):
    return [fnc(x, **kwargs) for x in chunk]


def pmap(fnc, n_jobs=1, chunk_size=10000):
    """
    Vectorizes `fnc` over its first argument, possibly in parallel.

    The returned function takes an iterable in place of the first argument of
    `fnc` and returns the list of results. Remaining arguments are passed on
    to each call. `fnc` must be a module-level function so that it can be
    sent to worker processes.

    Args:
        fnc (callable): function to vectorize.
        n_jobs (int, optional): default number of worker processes. With 1,
            everything runs in the current process. Defaults to 1.
        chunk_size (int, optional): default number of elements sent to a
            worker at once. Defaults to 10000.
    """
    @functools.wraps(fnc)
    def wrapper(iterable, *args,
                n_jobs=n_jobs, chunk_size=chunk_size, **kwargs):
        if n_jobs < 1 or chunk_size < 1:
            raise ValueError(
                "n_jobs and chunk_size must be positive, got {} and {}"
                .format(n_jobs, chunk_size))
        # Vectorize
        params = list(inspect.signature(fnc).parameters.keys())
        kwgs = dict(zip(params[1:], args))
        kwgs.update(kwargs)
        task = functools.partial(_map_chunk, fnc, kwgs)
        # Parallelize
        if n_jobs == 1:
            return task(iterable)
        chunks = list(toolz.partition_all(chunk_size, iterable))
        logger.debug("Mapping %s over %d chunks with %d processes",
                     fnc.__name__, len(chunks), n_jobs)
        with multiprocessing.Pool(n_jobs) as pool:
            res = pool.map(task, chunks)
        return list(toolz.concat(res))
    return wrapper


def _enclose(points, predicates=DEFAULT):
    return smallest_enclosing_disk_with(points, predicates)


smallest_enclosing_disks = pmap(_enclose)
smallest_enclosing_disks.__doc__ = """
Returns the smallest enclosing disk of each collection of points.

Args:
    collections (iterable): iterable of point collections.
    predicates (optional): predicate kernel. Defaults to the adaptive kernel.
    n_jobs (int, optional): number of worker processes. Defaults to 1.
    chunk_size (int, optional): number of collections sent to a worker at
        once. Defaults to 10000.

Returns:
    list of Disk, in input order.
"""
