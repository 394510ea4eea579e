#!/usr/bin/env python

"""
Capability sets of images, layers and the blob sources that back them.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO, List

from .digest import Digest


class CompressedLayer(ABC):
    """The minimal set of capabilities a layer must provide."""

    @abstractmethod
    def compressed(self) -> BinaryIO:
        """Opens the compressed layer content; the caller must close it."""

    @abstractmethod
    def digest(self) -> Digest:
        """Retrieves the digest of the compressed layer content."""

    @abstractmethod
    def media_type(self) -> str:
        """Retrieves the media type of the layer."""

    @abstractmethod
    def size(self) -> int:
        """Retrieves the size of the compressed layer content, in bytes."""


class Layer(CompressedLayer):
    """A layer that can also provide its uncompressed form."""

    @abstractmethod
    def diff_id(self) -> Digest:
        """Retrieves the digest of the uncompressed layer content."""

    @abstractmethod
    def uncompressed(self) -> BinaryIO:
        """Opens the uncompressed layer content; the caller must close it."""


class Image(ABC):
    """An image, as seen by consumers of the modern image format."""

    @abstractmethod
    def config_name(self) -> Digest:
        """Retrieves the digest of the raw image configuration."""

    @abstractmethod
    def layer_by_digest(self, digest: Digest) -> Layer:
        """Retrieves a layer by the digest of its compressed content."""

    @abstractmethod
    def layers(self) -> List[Layer]:
        """Retrieves the layers of the image."""

    @abstractmethod
    def media_type(self) -> str:
        """Retrieves the media type of the image manifest."""

    @abstractmethod
    def raw_config_file(self) -> bytes:
        """Retrieves the raw image configuration."""

    @abstractmethod
    def raw_manifest(self) -> bytes:
        """Retrieves the raw image manifest."""

    @abstractmethod
    def size(self) -> int:
        """Retrieves the size of the image manifest, in bytes."""


class BlobSource(ABC):
    """Anything that can retrieve blobs by digest."""

    @abstractmethod
    def blob(self, digest: Digest) -> BinaryIO:
        """
        Opens a blob.

        Args:
            digest: The digest of the blob.

        Returns:
            A binary stream; the caller must close it.
        """


class LayerByDigestSource(BlobSource):
    """A blob source that can also provide fully described layers."""

    @abstractmethod
    def layer_by_digest(self, digest: Digest) -> Layer:
        """
        Retrieves a layer.

        Args:
            digest: The digest of the compressed layer content.

        Returns:
            The corresponding layer.
        """


def supports_layer_by_digest(source: BlobSource) -> bool:
    """
    Checks if a given blob source can also provide fully described layers.

    Args:
        source: The blob source to check.

    Returns:
        True if the source is a LayerByDigestSource, False otherwise.
    """
    return isinstance(source, LayerByDigestSource)
