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
"""Single channel image stored with a zero border.

The border (margin) lets filters read neighbours past the image edges
without bounds checks: any logical coordinate in
``[-margin, width + margin) x [-margin, height + margin)`` is valid and reads 0
outside the image.

:class:`PaddedGrid` does not check accesses. Staying inside the margin is the
caller's responsibility and margins are sized once, by construction.
:class:`CheckedPaddedGrid` checks each access and raises :class:`IndexError`;
it is selected by :func:`make_grid` when :attr:`Config.CHECK_GRID_BOUNDS`
is set.
"""

__authors__ = ["degibbs developers"]
__license__ = "MIT"
__date__ = "12/03/2026"


import logging

import numpy

from .._config import Config


_logger = logging.getLogger(__name__)


UINT16_MAX = 65535


def to_uint16(values: numpy.ndarray) -> numpy.ndarray:
    """Round half to even then clip float values to the uint16 range."""
    return numpy.clip(numpy.rint(values), 0, UINT16_MAX).astype(numpy.uint16)


class PaddedGrid:
    """2D float32 buffer with a zero border of `margin` samples.

    :param int width: Image width
    :param int height: Image height
    :param int margin: Border size on each side
    """

    def __init__(self, width: int, height: int, margin: int):
        if width < 0 or height < 0 or margin < 0:
            raise ValueError(
                "Grid dimensions must be positive, got width=%d, height=%d, margin=%d"
                % (width, height, margin)
            )
        self.width = width
        self.height = height
        self.margin = margin
        self.data = numpy.zeros(
            (height + 2 * margin, width + 2 * margin), dtype=numpy.float32
        )

    def __repr__(self):
        return "%s(width=%d, height=%d, margin=%d)" % (
            self.__class__.__name__,
            self.width,
            self.height,
            self.margin,
        )

    @property
    def shape(self) -> tuple[int, int]:
        """Logical shape as (height, width)"""
        return self.height, self.width

    @property
    def logical(self) -> numpy.ndarray:
        """Writable view of the image without its border"""
        m = self.margin
        return self.data[m : m + self.height, m : m + self.width]

    def get(self, x: int, y: int) -> numpy.float32:
        return self.data[y + self.margin, x + self.margin]

    def set(self, x: int, y: int, value: float):
        self.data[y + self.margin, x + self.margin] = value

    def take(self, xs: numpy.ndarray, ys: numpy.ndarray) -> numpy.ndarray:
        """Gather samples at many logical coordinates.

        :param xs: Integer array of x coordinates
        :param ys: Integer array of y coordinates, same shape as `xs`
        """
        return self.data[ys + self.margin, xs + self.margin]

    def rows(self, y0: int, y1: int, dy: int = 0) -> numpy.ndarray:
        """View of logical rows [y0 + dy, y1 + dy) over the image width"""
        m = self.margin
        return self.data[y0 + dy + m : y1 + dy + m, m : m + self.width]

    def columns(self, x0: int, x1: int, dx: int = 0) -> numpy.ndarray:
        """View of logical columns [x0 + dx, x1 + dx) over the image height"""
        m = self.margin
        return self.data[m : m + self.height, x0 + dx + m : x1 + dx + m]

    def load(self, buffer):
        """Copy width * height row-major samples into the image.

        The border is left untouched.
        """
        buffer = numpy.asarray(buffer)
        if buffer.size != self.width * self.height:
            raise ValueError(
                "Buffer size %d does not match grid size %dx%d"
                % (buffer.size, self.width, self.height)
            )
        self.logical[...] = buffer.reshape(self.shape)

    def to_uint16(self) -> numpy.ndarray:
        """Returns the image as a new (height, width) uint16 array"""
        return to_uint16(self.logical)

    def store(self, buffer):
        """Write the image to a row-major buffer of width * height samples.

        Values are rounded half to even and clipped to [0, 65535].

        :param buffer: numpy array or mutable sequence
        """
        result = self.to_uint16()
        if isinstance(buffer, numpy.ndarray):
            if buffer.size != result.size:
                raise ValueError(
                    "Buffer size %d does not match grid size %dx%d"
                    % (buffer.size, self.width, self.height)
                )
            buffer[...] = result.reshape(buffer.shape)
        else:
            if len(buffer) != result.size:
                raise ValueError(
                    "Buffer size %d does not match grid size %dx%d"
                    % (len(buffer), self.width, self.height)
                )
            buffer[:] = result.ravel().tolist()


class CheckedPaddedGrid(PaddedGrid):
    """:class:`PaddedGrid` raising :class:`IndexError` on out of margin access"""

    def _check_x(self, x0, x1=None):
        x1 = x0 if x1 is None else x1
        if numpy.any(x0 < -self.margin) or numpy.any(x1 >= self.width + self.margin):
            raise IndexError(
                "x out of padded range [%d, %d) of %r"
                % (-self.margin, self.width + self.margin, self)
            )

    def _check_y(self, y0, y1=None):
        y1 = y0 if y1 is None else y1
        if numpy.any(y0 < -self.margin) or numpy.any(y1 >= self.height + self.margin):
            raise IndexError(
                "y out of padded range [%d, %d) of %r"
                % (-self.margin, self.height + self.margin, self)
            )

    def get(self, x, y):
        self._check_x(x)
        self._check_y(y)
        return super().get(x, y)

    def set(self, x, y, value):
        self._check_x(x)
        self._check_y(y)
        super().set(x, y, value)

    def take(self, xs, ys):
        xs = numpy.asarray(xs)
        ys = numpy.asarray(ys)
        if xs.size:
            self._check_x(xs.min(), xs.max())
            self._check_y(ys.min(), ys.max())
        return super().take(xs, ys)

    def rows(self, y0, y1, dy=0):
        if y1 > y0:
            self._check_y(y0 + dy, y1 - 1 + dy)
        return super().rows(y0, y1, dy)

    def columns(self, x0, x1, dx=0):
        if x1 > x0:
            self._check_x(x0 + dx, x1 - 1 + dx)
        return super().columns(x0, x1, dx)


def make_grid(width: int, height: int, margin: int) -> PaddedGrid:
    """Create a grid, checked when :attr:`Config.CHECK_GRID_BOUNDS` is set"""
    if Config.CHECK_GRID_BOUNDS:
        grid_class = CheckedPaddedGrid
    else:
        grid_class = PaddedGrid
    _logger.debug(
        "Allocate %s %dx%d with margin %d", grid_class.__name__, width, height, margin
    )
    return grid_class(width, height, margin)
