#!/usr/bin/env python

"""
JSON without canonicalization really bytes ;)
"""

import json

from copy import deepcopy

import canonicaljson

from .digest import Digest
from .errors import ParseError


class JsonBytes:
    """
    Base class to track the bytes representation of a JSON document.

    The raw bytes are never re-encoded; the JSON form is decoded on first use.
    """

    def __init__(self, _bytes: bytes):
        """
        Args:
            _bytes: The raw bytes value.
        """
        self.bytes = _bytes
        self._json = None

    def __bytes__(self):
        return self.get_bytes()

    def __str__(self):
        return self.get_bytes().decode("utf-8")

    @classmethod
    def from_json(cls, _json, **kwargs):
        """
        Initializes an instance from a JSON object, using its canonical encoding.

        Args:
            _json: The JSON object.

        Returns:
            The newly initialized object.
        """
        return cls(canonicaljson.encode_canonical_json(_json), **kwargs)

    def _decode(self):
        if self._json is None:
            try:
                self._json = json.loads(self.bytes)
            except (TypeError, ValueError) as exception:
                raise ParseError(f"Invalid JSON document: {exception}") from exception
        return self._json

    def get_bytes(self) -> bytes:
        """
        Retrieves the raw bytes.

        Returns:
            The raw bytes.
        """
        return self.bytes

    def get_digest(self) -> Digest:
        """
        Retrieves the SHA256 digest value of the raw bytes value.

        Returns:
            The SHA256 digest value of the raw bytes.
        """
        return Digest.calculate(self.get_bytes())

    def get_json(self):
        """
        Retrieves the bytes in JSON form.

        Returns:
            A copy of the bytes in JSON form.
        """
        return deepcopy(self._decode())
