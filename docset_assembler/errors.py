"""Exceptions raised while assembling a docset."""


class DocsetError(Exception):
    """Base class for every docset assembly failure."""


class ConfigurationError(DocsetError):
    """The configuration is invalid. Raised before anything touches the disk."""


class FilesystemError(DocsetError):
    """Creating, deleting or copying a file or directory failed."""


class DatabaseError(DocsetError):
    """Creating or populating the search index failed."""
