#!/usr/bin/env python

"""Blob sources backed by local storage."""

import logging

from pathlib import Path
from typing import BinaryIO, Union

from .digest import Digest
from .interfaces import BlobSource

LOGGER = logging.getLogger(__name__)


class DirectoryBlobSource(BlobSource):
    """
    Retrieves blobs from a directory laid out as blobs/<algorithm>/<hex>, as
    defined in:

    * https://github.com/opencontainers/image-spec/blob/master/image-layout.md
    """

    def __init__(self, root: Union[Path, str]):
        """
        Args:
            root: The directory containing the "blobs" directory.
        """
        self.root = Path(root)

    def __repr__(self):
        return f"{self.__class__.__name__}({self.root})"

    def get_path(self, digest: Digest) -> Path:
        """
        Retrieves the path of a given blob.

        Args:
            digest: The digest of the blob.

        Returns:
            The path of the blob.
        """
        digest = Digest.parse(digest)
        return self.root.joinpath("blobs", digest.algorithm, digest.hex)

    def blob(self, digest: Digest) -> BinaryIO:
        path = self.get_path(digest)
        LOGGER.debug("Opening blob: %s", path)
        return path.open("rb")

    def put_blob(self, data: bytes) -> Digest:
        """
        Stores a blob.

        Args:
            data: The blob content.

        Returns:
            The digest of the blob.
        """
        digest = Digest.calculate(data)
        path = self.get_path(digest)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return digest
