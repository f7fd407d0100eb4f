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
"""Separable 2D convolution with 5 taps kernels.

The 5x5 kernel ``outer(column_kernel, row_kernel)`` is applied as a vertical
pass followed by an horizontal pass (10 multiply-adds per sample instead of
25). Kernels are not flipped (this is a correlation, as in
:func:`scipy.ndimage.correlate`) and samples past the image edges are 0.
"""

__authors__ = ["degibbs developers"]
__license__ = "MIT"
__date__ = "12/03/2026"


import logging
from typing import Optional

import numpy

from .paddedgrid import PaddedGrid, make_grid
from ..utils.concurrency import parallel_for


_logger = logging.getLogger(__name__)


KERNEL_SIZE = 5
"""Number of taps of the kernels"""

KERNEL_HALF_WIDTH = KERNEL_SIZE // 2
"""Margin needed around a grid to convolve it"""


def _as_kernel(kernel, name: str) -> numpy.ndarray:
    kernel = numpy.asarray(kernel, dtype=numpy.float32)
    if kernel.shape != (KERNEL_SIZE,):
        raise ValueError(
            "%s must be a 1D kernel of %d taps, got shape %s"
            % (name, KERNEL_SIZE, kernel.shape)
        )
    return kernel


def convolve_separable(
    source: PaddedGrid,
    column_kernel,
    row_kernel,
    destination: PaddedGrid,
    num_workers: Optional[int] = None,
):
    """Convolve `source` into `destination`.

    ``destination[x, y] = sum(source[x + i - 2, y + j - 2] * column_kernel[j] * row_kernel[i])``

    :param source: Grid to convolve, with a margin of at least 2
    :param column_kernel: 5 taps kernel applied along y (first pass)
    :param row_kernel: 5 taps kernel applied along x (second pass)
    :param destination: Grid receiving the result, same size as `source`
    :param num_workers: Number of threads
    :raise ValueError: If the kernels, margin or sizes are wrong
    """
    column_kernel = _as_kernel(column_kernel, "column_kernel")
    row_kernel = _as_kernel(row_kernel, "row_kernel")
    if source.margin < KERNEL_HALF_WIDTH:
        raise ValueError(
            "Source margin must be at least %d, got %d"
            % (KERNEL_HALF_WIDTH, source.margin)
        )
    if destination.shape != source.shape:
        raise ValueError(
            "Destination shape %s does not match source shape %s"
            % (destination.shape, source.shape)
        )

    width, height = source.width, source.height
    temp = make_grid(width, height, KERNEL_HALF_WIDTH)

    def vertical_pass(y0, y1):
        band = temp.rows(y0, y1)
        band[...] = source.rows(y0, y1, -KERNEL_HALF_WIDTH) * column_kernel[0]
        for tap in range(1, KERNEL_SIZE):
            band += source.rows(y0, y1, tap - KERNEL_HALF_WIDTH) * column_kernel[tap]

    def horizontal_pass(x0, x1):
        band = destination.columns(x0, x1)
        band[...] = temp.columns(x0, x1, -KERNEL_HALF_WIDTH) * row_kernel[0]
        for tap in range(1, KERNEL_SIZE):
            band += temp.columns(x0, x1, tap - KERNEL_HALF_WIDTH) * row_kernel[tap]

    parallel_for(height, vertical_pass, num_workers)
    parallel_for(width, horizontal_pass, num_workers)
