#!/usr/bin/env python

"""Utility classes."""

import os

# https://github.com/docker/docker-py/blob/master/docker/constants.py
CHUNK_SIZE = int(os.environ.get("DS1I_CHUNK_SIZE", 2097152))


def read_all(file) -> bytes:
    """
    Reads a given file to completion.

    Args:
        file: The file from which to read.

    Returns:
        The bytes read from the file.
    """
    chunks = []
    while True:
        chunk = file.read(CHUNK_SIZE)
        if not chunk:
            break
        chunks.append(chunk)
    return b"".join(chunks)
