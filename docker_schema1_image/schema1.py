#!/usr/bin/env python

"""
Adapts Docker manifest v2.1 (schema 1) images to the modern image capability
set, as defined in:

* https://github.com/docker/distribution/blob/master/docs/spec/manifest-v2-1.md
"""

import logging

from functools import lru_cache
from typing import BinaryIO, List

from .digest import Digest
from .errors import UnknownSizeError, UnsupportedOperationError
from .interfaces import (
    BlobSource,
    CompressedLayer,
    Image,
    Layer,
    supports_layer_by_digest,
)
from .jsonbytes import JsonBytes
from .manifest import parse_fs_layers
from .partial import compressed_to_layer
from .specs import DockerMediaTypes, OCIMediaTypes
from .typing import EmptyConfig
from .utils import read_all

LOGGER = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def get_empty_config() -> EmptyConfig:
    """
    Retrieves the canonical empty image configuration, shared by all schema 1
    images.

    Returns:
        The raw bytes, digest and media type of the empty configuration.
    """
    json_bytes = JsonBytes.from_json({})
    return EmptyConfig(
        bytes=json_bytes.get_bytes(),
        digest=json_bytes.get_digest(),
        media_type=OCIMediaTypes.EMPTY_V1,
    )


class Schema1Layer(CompressedLayer):
    """
    Layer of a schema 1 image; everything beyond the digest is retrieved from the
    blob source on demand.
    """

    def __init__(self, digest: Digest, source: BlobSource):
        """
        Args:
            digest: The digest of the compressed layer content.
            source: The blob source from which to retrieve the layer content.
        """
        self._digest = digest
        self._source = source

    def __repr__(self):
        return f"{self.__class__.__name__}({self._digest})"

    def compressed(self) -> BinaryIO:
        return self._source.blob(self._digest)

    def digest(self) -> Digest:
        return self._digest

    def media_type(self) -> str:
        return DockerMediaTypes.IMAGE_ROOTFS_DIFF

    def size(self) -> int:
        # Schema 1 manifests do not record layer sizes; 0 would be a valid size.
        raise UnknownSizeError(f"Schema 1 layer {self._digest} cannot know its size")


class Schema1Image(Image):
    """
    Read-only view of a schema 1 image.
    """

    def __init__(
        self, manifest: bytes, digest: Digest, media_type: str, source: BlobSource
    ):
        """
        Args:
            manifest: The raw image manifest value.
            digest: The digest of the image manifest.
            media_type: The media type of the image manifest.
            source: The blob source from which to retrieve layers.
        """
        self._digest = digest
        self._manifest = manifest
        self._media_type = media_type
        self._source = source

    def __repr__(self):
        return f"{self.__class__.__name__}({self._digest})"

    def _unsupported(self, operation: str):
        raise UnsupportedOperationError(
            f"Schema 1 image {self._digest} does not support {operation}"
        )

    def config_file(self):
        """Schema 1 images have no image configuration to decode."""
        self._unsupported("config_file")

    def config_name(self) -> Digest:
        return get_empty_config().digest

    def digest(self) -> Digest:
        """Retrieves the digest of the image manifest."""
        return self._digest

    def layer_by_diff_id(self, diff_id: Digest):
        """Schema 1 manifests do not record diff ids."""
        self._unsupported("layer_by_diff_id")

    def layer_by_digest(self, digest: Digest) -> Layer:
        if supports_layer_by_digest(self._source):
            LOGGER.debug("Retrieving layer %s from %r", digest, self._source)
            return self._source.layer_by_digest(digest)

        LOGGER.debug("Deriving layer %s from compressed blob", digest)
        return compressed_to_layer(Schema1Layer(digest, self._source))

    def layers(self) -> List[Layer]:
        """
        Retrieves the layers of the image.

        Returns:
            The layers, in manifest order (most recent layer first).
        """
        return [
            self.layer_by_digest(digest) for digest in parse_fs_layers(self._manifest)
        ]

    def manifest(self):
        """Schema 1 manifests cannot be expressed as a modern image manifest."""
        self._unsupported("manifest")

    def media_type(self) -> str:
        return self._media_type

    def raw_config_file(self) -> bytes:
        return get_empty_config().bytes

    def raw_manifest(self) -> bytes:
        return self._manifest

    def size(self) -> int:
        # This is the size of the manifest, not of the image content.
        return len(self._manifest)


def fetch_and_wrap(
    source: BlobSource, digest: Digest, media_type: str
) -> Schema1Image:
    """
    Retrieves a schema 1 image manifest from a blob source.

    Args:
        source: The blob source from which to retrieve the manifest and layers.
        digest: The digest of the image manifest.
        media_type: The media type of the image manifest.

    Returns:
        The corresponding image.
    """
    with source.blob(digest) as file:
        manifest = read_all(file)
    LOGGER.debug("Retrieved manifest %s (%d bytes)", digest, len(manifest))
    return Schema1Image(manifest, digest, media_type, source)


def wrap_bytes(
    source: BlobSource, digest: Digest, media_type: str, manifest: bytes
) -> Schema1Image:
    """
    Wraps a previously retrieved schema 1 image manifest; no I/O is performed.

    Args:
        source: The blob source from which to retrieve layers.
        digest: The digest of the image manifest.
        media_type: The media type of the image manifest.
        manifest: The raw image manifest value.

    Returns:
        The corresponding image.
    """
    return Schema1Image(manifest, digest, media_type, source)
