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
"""The degibbs package contains the following sub-packages:

- degibbs.image: ringing artifacts removal filter for 2D images
- degibbs.utils: Miscellaneous convenient functions

The filter is available as :class:`GibbsRemovalFilter` and
:func:`remove_gibbs`. Library wide settings are in :class:`Config`.
"""

__authors__ = ["degibbs developers"]
__license__ = "MIT"
__date__ = "12/03/2026"

import logging as _logging

from ._config import Config  # noqa
from ._version import version, version_info, strictversion  # noqa
from .image.gibbsremoval import (  # noqa
    MAX_FILTER_WINDOW,
    GibbsRemovalFilter,
    remove_gibbs,
)

# Attach a do nothing logging handler for degibbs
_logging.getLogger(__name__).addHandler(_logging.NullHandler())
