#!/usr/bin/env python

"""
Abstraction of a docker image manifest, as defined in:

* https://github.com/docker/distribution/blob/master/docs/spec/manifest-v2-1.md
"""

from typing import List

from .digest import Digest
from .errors import ParseError
from .jsonbytes import JsonBytes


class Manifest(JsonBytes):
    """
    Read-only view of a Docker manifest v2.1.
    """

    def get_fs_layers(self) -> List[Digest]:
        """
        Retrieves the layer digests listed by the manifest.

        Returns:
            The layer digests, in manifest order (most recent layer first).
        """
        _json = self._decode()
        if not isinstance(_json, dict):
            raise ParseError(f"Manifest is not a JSON object: {type(_json).__name__}")

        fs_layers = _json.get("fsLayers")
        if fs_layers is None:
            return []
        if not isinstance(fs_layers, list):
            raise ParseError(f"fsLayers is not a list: {type(fs_layers).__name__}")

        result = []
        for i, fs_layer in enumerate(fs_layers):
            if not isinstance(fs_layer, dict):
                raise ParseError(f"fsLayers[{i}] is not an object: {fs_layer}")
            try:
                result.append(Digest.parse(fs_layer.get("blobSum")))
            except ValueError as exception:
                raise ParseError(
                    f"fsLayers[{i}] has an invalid blobSum: {exception}"
                ) from exception
        return result


def parse_fs_layers(manifest: bytes) -> List[Digest]:
    """
    Parses the ordered layer digests from a raw Docker manifest v2.1.

    Args:
        manifest: The raw image manifest value.

    Returns:
        The layer digests, in manifest order.
    """
    return Manifest(manifest).get_fs_layers()
