from __future__ import annotations


class DocBundleError(Exception):
    """Base class for fatal errors raised while collecting or rendering docs."""


class DirectoryReadError(DocBundleError, OSError):
    """Source directory is missing or cannot be listed."""


class FileReadError(DocBundleError, OSError):
    """A selected source file could not be read."""


class MissingInputError(DocBundleError, FileNotFoundError):
    """The combined document does not exist when the renderer starts."""


class WriteError(DocBundleError, OSError):
    """An output file could not be opened or committed."""
