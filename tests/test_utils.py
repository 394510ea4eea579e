#!/usr/bin/env python

"""Utilities tests."""

import io

import pytest

from docker_schema1_image import utils
from docker_schema1_image.utils import read_all


def test_read_all():
    """Test that a file can be read to completion."""
    data = b"0123456789" * 100
    assert read_all(io.BytesIO(data)) == data
    assert read_all(io.BytesIO(b"")) == b""


def test_read_all_chunked(monkeypatch: pytest.MonkeyPatch):
    """Test that a file is read to completion across many chunks."""
    monkeypatch.setattr(utils, "CHUNK_SIZE", 7)
    data = b"0123456789" * 10
    assert read_all(io.BytesIO(data)) == data
