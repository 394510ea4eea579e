#!/usr/bin/env python

"""Configures execution of pytest."""

import json

from pathlib import Path

import pytest

from docker_schema1_image import DirectoryBlobSource

from .testutils import TypingSchema1Layout, gzip_bytes


@pytest.fixture()
def directory_blob_source(tmp_path: Path) -> DirectoryBlobSource:
    """Provides an empty DirectoryBlobSource instance."""
    return DirectoryBlobSource(tmp_path)


@pytest.fixture()
def schema1_layout(directory_blob_source: DirectoryBlobSource) -> TypingSchema1Layout:
    """Provides a blob source containing a schema 1 image and its layers."""
    layers = [gzip_bytes(f"layer content {i}".encode("utf-8")) for i in range(3)]
    layer_digests = [directory_blob_source.put_blob(layer) for layer in layers]
    manifest = json.dumps(
        {
            "schemaVersion": 1,
            "name": "library/test",
            "tag": "latest",
            "fsLayers": [{"blobSum": digest} for digest in layer_digests],
        },
        indent=3,
    ).encode("utf-8")
    manifest_digest = directory_blob_source.put_blob(manifest)
    return TypingSchema1Layout(
        layers=layers,
        layer_digests=layer_digests,
        manifest=manifest,
        manifest_digest=manifest_digest,
        source=directory_blob_source,
    )
