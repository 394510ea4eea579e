#!/usr/bin/env python

"""
Derives full layers from layers that only know their compressed form.
"""

import gzip
import logging

from typing import BinaryIO

from .digest import Digest
from .hashingreader import HashingReader
from .interfaces import CompressedLayer, Layer

LOGGER = logging.getLogger(__name__)


class GzipReader(gzip.GzipFile):
    """
    Decompressing file that owns, and closes, the stream it decompresses.
    """

    def __init__(self, file: BinaryIO):
        """
        Args:
            file: The gzip compressed stream.
        """
        self.compressed_file = file
        super().__init__(fileobj=file, mode="rb")

    def close(self):
        """Closes the decompressor and the underlying stream."""
        try:
            super().close()
        finally:
            self.compressed_file.close()


class CompressedToLayer(Layer):
    """
    Layer derived from a compressed layer; uncompressed metadata is computed
    lazily, on first access.
    """

    def __init__(self, compressed_layer: CompressedLayer):
        """
        Args:
            compressed_layer: The layer from which to derive.
        """
        self.compressed_layer = compressed_layer
        self._diff_id = None

    def compressed(self) -> BinaryIO:
        return self.compressed_layer.compressed()

    def diff_id(self) -> Digest:
        # Unlocked; concurrent first calls each compute the same value.
        if self._diff_id is None:
            with self.uncompressed() as file:
                hashing_reader = HashingReader(file)
                for _ in hashing_reader:
                    pass
            self._diff_id = hashing_reader.get_digest()
            LOGGER.debug(
                "Computed diff id %s for layer %s",
                self._diff_id,
                self.compressed_layer.digest(),
            )
        return self._diff_id

    def digest(self) -> Digest:
        return self.compressed_layer.digest()

    def media_type(self) -> str:
        return self.compressed_layer.media_type()

    def size(self) -> int:
        return self.compressed_layer.size()

    def uncompressed(self) -> GzipReader:
        return GzipReader(self.compressed())


def compressed_to_layer(compressed_layer: CompressedLayer) -> Layer:
    """
    Derives a full layer from a given compressed layer.

    Args:
        compressed_layer: The layer from which to derive.

    Returns:
        The derived layer.
    """
    return CompressedToLayer(compressed_layer)
