#!/usr/bin/env python

"""Readers that hash the data they retrieve."""

import hashlib

from .digest import Digest
from .utils import CHUNK_SIZE


class HashingReader:
    """
    Reader that hashes the data it retrieves.
    """

    def __init__(self, file):
        """
        Args:
            file: The file from which to retrieve the file chunks.
        """
        self.file = file
        self.hasher = hashlib.sha256()
        self.size = 0

    def __iter__(self):
        while True:
            chunk = self.read(CHUNK_SIZE)
            if not chunk:
                break
            yield chunk

    def read(self, size: int = -1) -> bytes:
        """Reads, and hashes, up to a given number of bytes."""
        chunk = self.file.read(size)
        self.hasher.update(chunk)
        self.size += len(chunk)
        return chunk

    def get_digest(self) -> Digest:
        """Retrieves the digest value of the read data."""
        return Digest(f"sha256:{self.hasher.hexdigest()}")

    def get_size(self) -> int:
        """Retrieves the size (length) of the read data."""
        return self.size
