#!/usr/bin/env python

"""Adapts Docker manifest v2.1 (schema 1) images to the modern image capability set."""

from .blobsource import DirectoryBlobSource
from .digest import Digest
from .errors import (
    ParseError,
    Schema1Error,
    UnknownSizeError,
    UnsupportedOperationError,
)
from .interfaces import (
    BlobSource,
    CompressedLayer,
    Image,
    Layer,
    LayerByDigestSource,
    supports_layer_by_digest,
)
from .jsonbytes import JsonBytes
from .manifest import Manifest, parse_fs_layers
from .partial import compressed_to_layer
from .schema1 import (
    Schema1Image,
    Schema1Layer,
    fetch_and_wrap,
    get_empty_config,
    wrap_bytes,
)
from .specs import DockerMediaTypes, OCIMediaTypes

__version__ = "0.1.0"
