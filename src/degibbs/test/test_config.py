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
"""Tests of the library configuration and package"""

__authors__ = ["degibbs developers"]
__license__ = "MIT"
__date__ = "12/03/2026"


import logging
import os

import pytest

import degibbs
from degibbs import _version
from degibbs._config import Config, parse_env_as_bool, parse_env_as_int


@pytest.mark.parametrize(
    "content, expected",
    [("1", True), ("True", True), ("yes", True), ("0", False), ("n", False)],
)
def test_parse_env_as_bool(monkeypatch, content, expected):
    monkeypatch.setenv("DEGIBBS_TEST_VAR", content)
    assert parse_env_as_bool("DEGIBBS_TEST_VAR") is expected


def test_parse_env_as_bool_default(monkeypatch, caplog):
    monkeypatch.delenv("DEGIBBS_TEST_VAR", raising=False)
    assert parse_env_as_bool("DEGIBBS_TEST_VAR", default=True) is True
    monkeypatch.setenv("DEGIBBS_TEST_VAR", "maybe")
    with caplog.at_level(logging.WARNING):
        assert parse_env_as_bool("DEGIBBS_TEST_VAR", default=False) is False
    assert "DEGIBBS_TEST_VAR" in caplog.text


def test_parse_env_as_int(monkeypatch, caplog):
    monkeypatch.setenv("DEGIBBS_TEST_VAR", " 4 ")
    assert parse_env_as_int("DEGIBBS_TEST_VAR") == 4
    monkeypatch.setenv("DEGIBBS_TEST_VAR", "")
    assert parse_env_as_int("DEGIBBS_TEST_VAR", default=2) == 2
    for content in ("0", "-3", "four"):
        monkeypatch.setenv("DEGIBBS_TEST_VAR", content)
        caplog.clear()
        with caplog.at_level(logging.WARNING):
            assert parse_env_as_int("DEGIBBS_TEST_VAR") is None
        assert "DEGIBBS_TEST_VAR" in caplog.text


def test_config_defaults():
    assert Config.NUM_WORKERS is None or Config.NUM_WORKERS >= 1
    assert Config.MIN_BAND_SIZE >= 1
    # Enabled by the test suite
    assert Config.CHECK_GRID_BOUNDS is True


def test_package():
    assert degibbs.MAX_FILTER_WINDOW == 100
    assert degibbs.Config is Config
    assert degibbs.version == _version.version
    assert degibbs.version.count(".") >= 2
    assert callable(degibbs.remove_gibbs)


def test_license_headers():
    package_dir = os.path.dirname(os.path.abspath(degibbs.__file__))
    for dirpath, _, filenames in os.walk(package_dir):
        for filename in filenames:
            if not filename.endswith(".py") or filename == "conftest.py":
                continue
            with open(os.path.join(dirpath, filename)) as f:
                header = f.read(400)
            assert "Copyright (c) 2026 degibbs developers" in header, filename
