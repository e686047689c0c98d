from __future__ import annotations


class DocumentStoreError(Exception):
    """Base class for page document store failures."""


class StorageFaultError(DocumentStoreError, OSError):
    """The store root cannot be created or read."""


class WriteFaultError(DocumentStoreError, OSError):
    """A document could not be written to disk."""


class DocumentSerializationError(DocumentStoreError, TypeError):
    """The document passed to save() is not representable as JSON."""


class InvalidPageIdError(DocumentStoreError, ValueError):
    """The identifier cannot be used as a storage key."""
