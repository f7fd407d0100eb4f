#!/usr/bin/env python3
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

__authors__ = ["degibbs developers"]
__date__ = "12/03/2026"
__license__ = "MIT"

import sys
import os
import logging

logging.basicConfig(level=logging.INFO)

logger = logging.getLogger("degibbs.setup")

from setuptools import setup, find_packages


PROJECT = "degibbs"
if sys.version_info < (3, 10):
    logger.error(PROJECT + " requires Python 3.10 or later")


def get_version():
    """Returns the version defined in src/degibbs/_version.py"""
    filename = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                            "src", PROJECT, "_version.py")
    namespace = {}
    with open(filename) as f:
        exec(compile(f.read(), filename, "exec"), namespace)
    return namespace["strictversion"]


def get_project_configuration():
    """Returns project arguments for setup"""
    install_requires = [
        # for all the computation
        "numpy",
    ]

    # extras requirements: target 'full' to install all dependencies at once
    full_requires = [
        "scipy",
    ]

    test_requires = ["pytest", "scipy"]

    extras_require = {
        "full": full_requires,
        "test": test_requires,
    }

    # Set the DEGIBBS_INSTALL_REQUIRES_STRIP env. var. to a comma-separated
    # list of package names to remove them from install_requires
    install_requires_strip = os.environ.get("DEGIBBS_INSTALL_REQUIRES_STRIP")
    if install_requires_strip is not None:
        for package_name in install_requires_strip.split(","):
            install_requires.remove(package_name)

    return dict(
        name=PROJECT,
        version=get_version(),
        description="Removal of ringing (Gibbs phenomenon) artifacts from single channel images",
        license="MIT",
        python_requires=">=3.10",
        package_dir={"": "src"},
        packages=find_packages(where="src"),
        install_requires=install_requires,
        extras_require=extras_require,
        classifiers=[
            "Intended Audience :: Science/Research",
            "License :: OSI Approved :: MIT License",
            "Programming Language :: Python :: 3",
            "Topic :: Scientific/Engineering :: Image Processing",
        ],
    )


if __name__ == "__main__":
    setup(**get_project_configuration())
