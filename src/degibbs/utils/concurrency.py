# /*##########################################################################
#
# Copyright (c) 2026 degibbs developers
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
# THE SOFTWARE.
#
# ###########################################################################*/
"""Data parallel helpers.

Processing passes split an image into bands of rows or columns which are
computed independently. numpy releases the GIL in its vectorized loops, so
bands are dispatched to a thread pool.
"""

__authors__ = ["degibbs developers"]
__license__ = "MIT"
__date__ = "12/03/2026"


import logging
import numbers
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterator, Optional

from .._config import Config


_logger = logging.getLogger(__name__)


def get_num_workers(num_workers: Optional[int] = None) -> int:
    """Returns the number of workers to use.

    :param num_workers: Explicit number of workers,
        None to use :attr:`Config.NUM_WORKERS` or the number of CPUs.
    :raise TypeError: If the number of workers is not an integer
    :raise ValueError: If the number of workers is lower than 1
    """
    if num_workers is None:
        num_workers = Config.NUM_WORKERS
    if num_workers is None:
        num_workers = os.cpu_count() or 1
    if isinstance(num_workers, bool) or not isinstance(num_workers, numbers.Integral):
        raise TypeError("Number of workers must be an integer, got %r" % (num_workers,))
    if num_workers < 1:
        raise ValueError("Number of workers must be at least 1, got %s" % num_workers)
    return int(num_workers)


def split_range(length: int, parts: int) -> Iterator[tuple[int, int]]:
    """Split [0, length) in at most `parts` contiguous non-empty bands.

    Bands sizes differ by at most one.
    """
    parts = max(1, min(parts, length))
    size, extra = divmod(length, parts)
    start = 0
    for index in range(parts):
        stop = start + size + (1 if index < extra else 0)
        if stop > start:
            yield start, stop
        start = stop


def parallel_for(
    length: int,
    func: Callable[[int, int], None],
    num_workers: Optional[int] = None,
):
    """Call `func(start, stop)` on bands covering [0, length).

    The call returns once every band is processed.
    Bands must write to disjoint locations.
    Exceptions raised while processing a band are raised again here.

    :param length: Number of rows (or columns) to process
    :param func: Function processing the band [start, stop)
    :param num_workers: Number of threads, see :func:`get_num_workers`
    """
    num_workers = get_num_workers(num_workers)
    nb_bands = min(num_workers, max(1, length // max(1, Config.MIN_BAND_SIZE)))
    bands = list(split_range(length, nb_bands))

    if len(bands) <= 1:
        for start, stop in bands:
            func(start, stop)
        return

    _logger.debug("Dispatch %d bands on %d workers", len(bands), num_workers)
    with ThreadPoolExecutor(max_workers=num_workers) as executor:
        futures = [executor.submit(func, start, stop) for start, stop in bands]
        for future in futures:
            future.result()
