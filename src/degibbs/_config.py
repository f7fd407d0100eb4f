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
"""This module contains library wide configuration.
"""

__authors__ = ["degibbs developers"]
__license__ = "MIT"
__date__ = "12/03/2026"


import logging
import os
from typing import Optional


_logger = logging.getLogger(__name__)


def parse_env_as_bool(key: str, default: Optional[bool] = None) -> Optional[bool]:
    """Parse `key` env. var. and convert its value to a boolean or None.

    If it cannot parse it or if None, `default` is returned.
    """
    content = os.environ.get(key, "")
    value = content.lower()
    if value in ["1", "true", "yes", "y"]:
        return True
    if value in ["0", "false", "no", "n"]:
        return False
    if value in ["none", ""]:
        return default
    msg = "Env variable '%s' contains '%s'. But a boolean or an empty \
        string was expected. Variable ignored."
    _logger.warning(msg, key, content)
    return default


def parse_env_as_int(key: str, default: Optional[int] = None) -> Optional[int]:
    """Parse `key` env. var. as a strictly positive integer.

    If it is not set, empty or invalid, `default` is returned.
    """
    content = os.environ.get(key, "").strip()
    if content.lower() in ["none", ""]:
        return default
    try:
        value = int(content)
    except ValueError:
        value = 0
    if value < 1:
        _logger.warning(
            "Env variable '%s' contains '%s'. But a positive integer was expected. "
            "Variable ignored.",
            key,
            content,
        )
        return default
    return value


class Config(object):
    """
    Class containing shared global configuration for the degibbs library.
    """

    NUM_WORKERS: Optional[int] = parse_env_as_int("DEGIBBS_NUM_WORKERS")
    """Default number of threads used to process an image.

    ``None`` (default) uses one thread per CPU (:func:`os.cpu_count`).
    A value of 1 runs every pass in the calling thread.

    It can be initialised with the ``DEGIBBS_NUM_WORKERS`` environment
    variable.
    """

    MIN_BAND_SIZE: int = 16
    """Minimum number of rows (or columns) given to a single worker.

    Images smaller than this are processed in the calling thread.
    """

    CHECK_GRID_BOUNDS: bool = parse_env_as_bool(
        "DEGIBBS_CHECK_GRID_BOUNDS", default=False
    )
    """Whether padded grids check every access against their margin.

    This is slow and meant for debugging and for the test suite, which
    enables it to catch margin sizing regressions.

    It can be initialised with the ``DEGIBBS_CHECK_GRID_BOUNDS`` environment
    variable.
    """
