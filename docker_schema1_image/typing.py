#!/usr/bin/env python

# pylint: disable=missing-class-docstring,too-few-public-methods

"""Typing classes."""

from typing import NamedTuple

from .digest import Digest


class EmptyConfig(NamedTuple):
    bytes: bytes
    digest: Digest
    media_type: str
