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
"""
This module provides :class:`GibbsRemovalFilter` and :func:`remove_gibbs`,
a filter reducing ringing artifacts (Gibbs phenomenon) of single channel
uint16 images.

Each pixel is replaced by the mean of the pixels met walking along its
gradient direction, either forward or backward: the side whose mean is the
closest to the original pixel value is kept.

Colour images must be processed one channel at a time.
The result is usually smoothed afterwards with a small Gaussian blur,
which is left to the caller.

Example:

.. code-block:: python

    from degibbs.image.gibbsremoval import GibbsRemovalFilter

    gibbs_filter = GibbsRemovalFilter(data, width, height)
    result = gibbs_filter.process(window=10)
"""

__authors__ = ["degibbs developers"]
__license__ = "MIT"
__date__ = "12/03/2026"


import collections.abc
import logging
import numbers
import time
from typing import Optional

import numpy

from .gradient import build_gradient_field
from .paddedgrid import UINT16_MAX, PaddedGrid, make_grid, to_uint16
from ..utils.concurrency import parallel_for


_logger = logging.getLogger(__name__)


MAX_FILTER_WINDOW = 100
"""Maximum length (in pixels) of the directional sampling window"""

IMAGE_MARGIN = MAX_FILTER_WINDOW + 2
"""Border of the image grid.

Rounding a sample coordinate can move it one pixel past the window length.
"""

assert IMAGE_MARGIN >= MAX_FILTER_WINDOW + 2


def directional_mean(
    image: PaddedGrid, x: int, y: int, window: int, kx: float, ky: float
) -> numpy.float32:
    """Mean of the pixels met from (x, y) walking `window` steps along (kx, ky).

    Steps are rounded to the nearest pixel and consecutive steps landing on
    the same pixel are counted once.
    If no pixel is met, the value of (x, y) is returned.

    :param image: Image grid with a margin larger than `window` + 1
    :param x: Pixel column
    :param y: Pixel row
    :param window: Number of steps
    :param kx: x component of the unit direction
    :param ky: y component of the unit direction
    """
    kx = numpy.float32(kx)
    ky = numpy.float32(ky)
    fx = numpy.float32(x)
    fy = numpy.float32(y)
    total = numpy.float32(0)
    count = 0
    previous = x, y
    for step in range(1, window + 1):
        step = numpy.float32(step)
        position = int(numpy.rint(fx + kx * step)), int(numpy.rint(fy + ky * step))
        if position != previous:
            total += image.get(*position)
            count += 1
            previous = position
    if count == 0:
        return image.get(x, y)
    return total / numpy.float32(count)


def directional_mean_band(
    image: PaddedGrid,
    y0: int,
    y1: int,
    window: int,
    kx: numpy.ndarray,
    ky: numpy.ndarray,
) -> numpy.ndarray:
    """Vectorized :func:`directional_mean` of all pixels of rows [y0, y1).

    :param image: Image grid with a margin larger than `window` + 1
    :param y0: First row
    :param y1: Row after the last one
    :param window: Number of steps
    :param kx: (y1 - y0, width) x components of the directions
    :param ky: (y1 - y0, width) y components of the directions
    :returns: (y1 - y0, width) float32 array
    """
    ys, xs = numpy.mgrid[y0:y1, 0 : image.width]
    fx = xs.astype(numpy.float32)
    fy = ys.astype(numpy.float32)
    total = numpy.zeros(xs.shape, dtype=numpy.float32)
    count = numpy.zeros(xs.shape, dtype=numpy.int32)
    zero = numpy.float32(0)

    previous_x, previous_y = xs, ys
    for step in range(1, window + 1):
        step = numpy.float32(step)
        px = numpy.rint(fx + kx * step).astype(numpy.intp)
        py = numpy.rint(fy + ky * step).astype(numpy.intp)
        moved = (px != previous_x) | (py != previous_y)
        total += numpy.where(moved, image.take(px, py), zero)
        count += moved
        previous_x, previous_y = px, py

    original = image.rows(y0, y1)
    with numpy.errstate(divide="ignore", invalid="ignore"):
        mean = total / count.astype(numpy.float32)
    return numpy.where(count > 0, mean, original)


def _check_image_data(image_data, width, height) -> numpy.ndarray:
    if image_data is None:
        raise TypeError("image_data is None")
    if not isinstance(width, numbers.Integral) or not isinstance(
        height, numbers.Integral
    ):
        raise TypeError(
            "width and height must be integers, got %r and %r" % (width, height)
        )
    data = numpy.asarray(image_data)
    if data.size == 0:
        raise ValueError("Zero size image")
    if data.size != width * height or width < 0 or height < 0:
        raise ValueError(
            "Wrong width and/or height value (expected: image_data size = width * height),"
            " got size=%d, width=%d, height=%d" % (data.size, width, height)
        )
    if data.dtype != numpy.uint16:
        if data.dtype.kind not in "ui":
            raise ValueError(
                "image_data must contain unsigned 16 bits integers, got %s" % data.dtype
            )
        if data.min() < 0 or data.max() > UINT16_MAX:
            raise ValueError(
                "image_data values must be in [0, %d], got [%d, %d]"
                % (UINT16_MAX, data.min(), data.max())
            )
    return data


def _check_window(window):
    if isinstance(window, bool) or not isinstance(window, numbers.Integral):
        raise TypeError("window must be an integer, got %r" % (window,))
    if window < 0 or window > MAX_FILTER_WINDOW:
        raise ValueError(
            "Wrong value of window parameter (expected: [0...%d]), got %d"
            % (MAX_FILTER_WINDOW, window)
        )


class GibbsRemovalFilter:
    """Filter removing ringing artifacts of a single channel image.

    Image derivatives are computed once, at construction.
    :meth:`process_image` and :meth:`process` can then be called many times,
    with different windows.

    :param image_data: Row-major image samples (uint16), flat or 2D
    :param int width: Image width
    :param int height: Image height
    :param num_workers: Number of threads, None to use
        :attr:`degibbs.Config.NUM_WORKERS`
    :raise TypeError: If image_data is None
    :raise ValueError: If the image is empty or width/height are wrong
    """

    def __init__(
        self, image_data, width: int, height: int, num_workers: Optional[int] = None
    ):
        data = _check_image_data(image_data, width, height)
        self._num_workers = num_workers

        t0 = time.time()
        self._image = make_grid(width, height, IMAGE_MARGIN)
        assert self._image.margin >= MAX_FILTER_WINDOW + 2
        self._image.load(data)
        self._gradient = build_gradient_field(self._image, num_workers)
        _logger.debug(
            "GibbsRemovalFilter %dx%d initialized in %.3fs",
            width,
            height,
            time.time() - t0,
        )

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    def _process_band(self, window, result, y0, y1):
        kx = self._gradient.dx.rows(y0, y1)
        ky = self._gradient.dy.rows(y0, y1)
        forward = directional_mean_band(self._image, y0, y1, window, kx, ky)
        backward = directional_mean_band(self._image, y0, y1, window, -kx, -ky)
        original = self._image.rows(y0, y1)
        chosen = numpy.where(
            numpy.abs(forward - original) < numpy.abs(backward - original),
            forward,
            backward,
        )
        result[y0:y1] = to_uint16(chosen)

    def _process(self, window: int) -> numpy.ndarray:
        t0 = time.time()
        result = numpy.empty((self.height, self.width), dtype=numpy.uint16)
        parallel_for(
            self.height,
            lambda y0, y1: self._process_band(window, result, y0, y1),
            self._num_workers,
        )
        _logger.debug(
            "Image %dx%d processed with window %d in %.3fs",
            self.width,
            self.height,
            window,
            time.time() - t0,
        )
        return result

    def process(self, window: int) -> numpy.ndarray:
        """Returns the processed image as a new (height, width) uint16 array.

        :param int window: Sampling window, in [0, MAX_FILTER_WINDOW]
        :raise TypeError: If window is not an integer
        :raise ValueError: If window is out of range
        """
        _check_window(window)
        return self._process(window)

    def process_image(self, window: int, output_image):
        """Process the image and write it to `output_image`.

        For each pixel the forward mean is kept only when it is strictly
        closer to the pixel value than the backward mean.

        :param int window: Sampling window, in [0, MAX_FILTER_WINDOW]
        :param output_image: numpy array or mutable sequence of
            width * height samples, written in row-major order
        :raise TypeError: If output_image is None or not writable as a
            sequence, or if window is not an integer
        :raise ValueError: If output_image has a wrong size, is read-only or
            has a dtype not holding uint16 values, or if window is out of range
        """
        if output_image is None:
            raise TypeError("output_image is None")
        expected = self.width * self.height
        if isinstance(output_image, numpy.ndarray):
            size = output_image.size
            if not output_image.flags.writeable:
                raise ValueError("output_image is read-only")
            if not numpy.can_cast(numpy.uint16, output_image.dtype):
                raise ValueError(
                    "output_image cannot hold unsigned 16 bits integers, got %s"
                    % output_image.dtype
                )
        else:
            if not isinstance(output_image, collections.abc.MutableSequence):
                raise TypeError(
                    "output_image must be a numpy array or a mutable sequence, got %s"
                    % type(output_image).__name__
                )
            size = len(output_image)
        if size != expected:
            raise ValueError(
                "Wrong array size (expected: output_image size = width * height = %d), got %d"
                % (expected, size)
            )
        _check_window(window)

        result = self._process(window)
        if isinstance(output_image, numpy.ndarray):
            output_image[...] = result.reshape(output_image.shape)
        else:
            output_image[:] = result.ravel().tolist()


def remove_gibbs(image, window: int, num_workers: Optional[int] = None) -> numpy.ndarray:
    """Apply :class:`GibbsRemovalFilter` on a 2D image.

    :param numpy.ndarray image: 2D array of uint16 values
    :param int window: Sampling window, in [0, MAX_FILTER_WINDOW]
    :param num_workers: Number of threads
    :returns: the filtered image as a new uint16 array
    """
    image = numpy.asarray(image)
    if image.ndim != 2:
        raise ValueError("remove_gibbs deals with arrays of dimension 2 only")
    height, width = image.shape
    gibbs_filter = GibbsRemovalFilter(image.ravel(), width, height, num_workers)
    return gibbs_filter.process(window)
