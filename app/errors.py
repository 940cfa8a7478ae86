class TypespeedError(Exception):
    """Base class for application errors."""


class StorageError(TypespeedError):
    """Reading or writing a data file failed."""
