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
"""Utilities for writing tests.

- :class:`_TestOptions` reads the test options from environment variables.
- :func:`ringing_step_image` generates a test image with ringing artifacts.
"""

__authors__ = ["degibbs developers"]
__license__ = "MIT"
__date__ = "12/03/2026"


import os

import numpy


class _TestOptions(object):
    def __init__(self):
        self.TEST_LOW_MEM = False
        """Skip tests using too much memory"""

        self.TEST_LOW_MEM_REASON = ""
        """Reason for low_memory tests are disabled if any"""

    def configure(self):
        """Configure the TestOptions class from the environment variables"""
        if os.environ.get("DEGIBBS_TEST_LOW_MEM", "False") == "True":
            self.TEST_LOW_MEM = True
            self.TEST_LOW_MEM_REASON = "Skipped by DEGIBBS_TEST_LOW_MEM env var"


def ringing_step_image(width=64, height=48, low=10000, high=40000, amplitude=3000, period=4.0):
    """Returns a vertical step edge with decaying oscillations on both sides.

    :returns: (height, width) uint16 array
    """
    x = numpy.arange(width, dtype=numpy.float64) - width // 2
    profile = numpy.where(x < 0, low, high).astype(numpy.float64)
    ringing = amplitude * numpy.cos(numpy.pi * x / period) * numpy.exp(-numpy.abs(x) / 6.0)
    profile += numpy.where(x < 0, ringing, -ringing)
    image = numpy.tile(profile, (height, 1))
    return numpy.clip(numpy.rint(image), 0, 65535).astype(numpy.uint16)
