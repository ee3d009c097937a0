"""Error types raised by the spec pipeline.

The CLI turns any SpecError into a non-zero exit status.
"""


class SpecError(Exception):
    """Base class for all pipeline failures."""


class LoadError(SpecError):
    """The seed or generated spec could not be read or parsed."""


class ScanError(SpecError):
    """The external source scanner failed."""


class ResolveError(SpecError):
    """A response reference is malformed."""


class PartitionError(SpecError):
    """Two definitions map to the same output document."""


class WriteError(SpecError):
    """An output directory or file could not be written."""
