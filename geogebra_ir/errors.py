"""Exception hierarchy for workspace assembly and document I/O."""


class GeogebraError(Exception):
    pass


class ArchiveError(GeogebraError):
    """Raised when the output container cannot be written or read."""


class SerializationError(GeogebraError):
    """Raised when an assembled document tree cannot be rendered.

    The builder only produces well-formed trees, so this signals a broken
    internal invariant rather than a caller mistake.
    """


class DocumentParseError(GeogebraError):
    pass


class IndexedAttributeError(DocumentParseError):
    """Raised when an ``a0``, ``a1``, ... attribute map is not sequential."""
