#!/usr/bin/env python

"""Content addresses."""

import hashlib
import re

# Hex digest lengths, keyed by algorithm.
ALGORITHMS = {"sha256": 64, "sha384": 96, "sha512": 128}


class Digest(str):
    """A algorithm prefixed hash value, in form <algorithm>:<hex>."""

    def __new__(cls, digest: str):
        if not digest or ":" not in digest:
            raise ValueError(digest)
        algorithm, _hex = digest.split(":", 1)
        if ALGORITHMS.get(algorithm) != len(_hex) or not re.fullmatch(
            r"[0-9a-fA-F]+", _hex
        ):
            raise ValueError(digest)
        # Hex is case insensitive; the canonical form is lowercase.
        _hex = _hex.lower()
        obj = super().__new__(cls, f"{algorithm}:{_hex}")
        obj.algorithm = algorithm
        obj.hex = _hex
        return obj

    @staticmethod
    def parse(digest: str) -> "Digest":
        """
        Initializes a Digest from a given digest value.

        Args:
            digest: A digest value in form <algorithm>:<hex>.

        Returns:
            The newly initialized object.
        """
        if not isinstance(digest, str):
            raise ValueError(digest)
        return Digest(digest)

    @staticmethod
    def calculate(data: bytes, *, algorithm: str = "sha256") -> "Digest":
        """
        Calculates the digest value for given data.

        Args:
            data: The data for which to calculate the digest value.
            algorithm: The hash algorithm to use.

        Returns:
            The Digest containing the corresponding digest value.
        """
        if algorithm not in ALGORITHMS:
            raise ValueError(algorithm)
        return Digest(f"{algorithm}:{hashlib.new(algorithm, data).hexdigest()}")
