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
"""Image gradient direction field.

Partial derivatives are estimated with the 5 taps optimized
smoothing/derivative filter pair of Farid and Simoncelli, then each
(dx, dy) pair is scaled to unit length.
"""

__authors__ = ["degibbs developers"]
__license__ = "MIT"
__date__ = "12/03/2026"


import logging
import time
from typing import NamedTuple, Optional

import numpy

from .convolution import convolve_separable
from .paddedgrid import PaddedGrid, make_grid
from ..utils.concurrency import parallel_for


_logger = logging.getLogger(__name__)


def _constant(values) -> numpy.ndarray:
    array = numpy.array(values, dtype=numpy.float32)
    array.flags.writeable = False
    return array


SMOOTHING_KERNEL = _constant([0.037659, 0.249153, 0.426375, 0.249153, 0.037659])
"""Interpolation (smoothing) kernel"""

DERIVATIVE_KERNEL = _constant([0.109604, 0.276691, 0.0, -0.276691, -0.109604])
"""First order derivative kernel"""

EPSILON = 1e-6
"""Added to the gradient magnitude to avoid division by zero on flat areas"""


class GradientField(NamedTuple):
    """Unit gradient direction of each pixel"""

    dx: PaddedGrid
    dy: PaddedGrid


def compute_derivatives(
    image: PaddedGrid, num_workers: Optional[int] = None
) -> tuple[PaddedGrid, PaddedGrid]:
    """Returns the (dI/dx, dI/dy) partial derivatives of an image.

    :param image: Grid with a margin of at least 2
    :param num_workers: Number of threads
    """
    dx = make_grid(image.width, image.height, 0)
    dy = make_grid(image.width, image.height, 0)
    convolve_separable(image, SMOOTHING_KERNEL, DERIVATIVE_KERNEL, dx, num_workers)
    convolve_separable(image, DERIVATIVE_KERNEL, SMOOTHING_KERNEL, dy, num_workers)
    return dx, dy


def normalize_field(
    dx: PaddedGrid, dy: PaddedGrid, num_workers: Optional[int] = None
):
    """Scale each (dx, dy) pair in place to (almost) unit length.

    Pixels with a null gradient stay null.
    """
    if dx.shape != dy.shape:
        raise ValueError("dx shape %s differs from dy shape %s" % (dx.shape, dy.shape))

    def normalize(y0, y1):
        band_x = dx.rows(y0, y1)
        band_y = dy.rows(y0, y1)
        squared = band_x * band_x + band_y * band_y
        norm = (1.0 / (numpy.sqrt(squared, dtype=numpy.float64) + EPSILON)).astype(
            numpy.float32
        )
        band_x *= norm
        band_y *= norm

    parallel_for(dx.height, normalize, num_workers)


def build_gradient_field(
    image: PaddedGrid, num_workers: Optional[int] = None
) -> GradientField:
    """Compute the normalized gradient direction field of an image"""
    t0 = time.time()
    dx, dy = compute_derivatives(image, num_workers)
    normalize_field(dx, dy, num_workers)
    _logger.debug(
        "Gradient field of %dx%d image computed in %.3fs",
        image.width,
        image.height,
        time.time() - t0,
    )
    return GradientField(dx, dy)
