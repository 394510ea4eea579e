#!/usr/bin/env python

"""Error kinds raised when adapting legacy images."""


class Schema1Error(Exception):
    """Base class for all errors raised by this package."""


class ParseError(Schema1Error, ValueError):
    """A manifest, or a digest within it, is malformed."""


class UnknownSizeError(Schema1Error, RuntimeError):
    """The size of a legacy layer cannot be known."""


class UnsupportedOperationError(Schema1Error, NotImplementedError):
    """The legacy format cannot express the requested capability."""
