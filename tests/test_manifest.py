#!/usr/bin/env python

# pylint: disable=redefined-outer-name

"""Manifest tests."""

import pytest

from docker_schema1_image import (
    Digest,
    Manifest,
    ParseError,
    parse_fs_layers,
)

from .testutils import get_test_data

DIGEST_A = "sha256:5f70bf18a086007016e948b04aed3b82103a36bea41755b6cddfaf10ace3c6ef"
DIGEST_B = "sha256:cc8567d70002e957612902a8e985ea129d831ebe04057d88fb644857caa45d11"


@pytest.fixture()
def manifest_v1(request) -> bytes:
    """Provides a raw Docker manifest v2.1."""
    return get_test_data(request, "manifest.v1.json")


@pytest.fixture()
def manifest_v2(request) -> bytes:
    """Provides a raw Docker manifest v2.2."""
    return get_test_data(request, "manifest.v2.json")


def test___init__(manifest_v1: bytes):
    """Test that an image manifest can be instantiated without parsing."""
    manifest = Manifest(manifest_v1)
    assert manifest.bytes is manifest_v1
    assert Manifest(b"not json").get_bytes() == b"not json"


def test_get_fs_layers(manifest_v1: bytes):
    """Test that layer digests are retrieved in manifest order, duplicates included."""
    fs_layers = Manifest(manifest_v1).get_fs_layers()
    assert fs_layers == [DIGEST_A, DIGEST_A, DIGEST_B, DIGEST_A]
    assert all(isinstance(digest, Digest) for digest in fs_layers)


def test_get_fs_layers_missing(manifest_v2: bytes):
    """Test that manifests without fsLayers have no layer digests."""
    assert Manifest(manifest_v2).get_fs_layers() == []
    assert Manifest(b"{}").get_fs_layers() == []


def test_get_fs_layers_ignores_unknown_fields():
    """Test that unrecognized fields are ignored."""
    manifest = (
        b'{"foo": 1, "fsLayers": [{"blobSum": "%s", "bar": true}]}'
        % DIGEST_B.encode()
    )
    assert parse_fs_layers(manifest) == [DIGEST_B]


@pytest.mark.parametrize(
    "_bytes",
    [
        b"",
        b"{",
        b"\xff\xfe",
        b"null",
        b'"fsLayers"',
        b'[{"blobSum": "%s"}]' % DIGEST_A.encode(),
        b'{"fsLayers": {"blobSum": "%s"}}' % DIGEST_A.encode(),
        b'{"fsLayers": ["%s"]}' % DIGEST_A.encode(),
        b'{"fsLayers": [{}]}',
        b'{"fsLayers": [{"blobSum": 1}]}',
        b'{"fsLayers": [{"blobSum": "sha256:bad"}]}',
        b'{"fsLayers": [{"blobSum": "%s"}, {"blobSum": "md5:0"}]}'
        % DIGEST_A.encode(),
    ],
)
def test_parse_fs_layers_invalid(_bytes: bytes):
    """Test that malformed manifests are rejected as a whole."""
    result = None
    with pytest.raises(ParseError):
        result = parse_fs_layers(_bytes)
    assert result is None


def test_parse_fs_layers_chains_cause():
    """Test that the underlying cause of a parse error is retained."""
    with pytest.raises(ParseError) as exc_info:
        parse_fs_layers(b'{"fsLayers": [{"blobSum": "sha256:bad"}]}')
    assert isinstance(exc_info.value.__cause__, ValueError)
    assert "fsLayers[0]" in str(exc_info.value)
    assert "sha256:bad" in str(exc_info.value)


def test_parse_fs_layers_uppercase():
    """Test that uppercase blobSum hex is accepted, and normalized to lowercase."""
    blob_sum = f"sha256:{DIGEST_B[7:].upper()}"
    manifest = b'{"fsLayers": [{"blobSum": "%s"}]}' % blob_sum.encode()
    assert parse_fs_layers(manifest) == [DIGEST_B]
