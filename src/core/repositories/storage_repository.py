"""Abstract contract for raw blob storage."""

from abc import ABC, abstractmethod


class BlobStore(ABC):
    """Contract for writing, reading and deleting blobs by path.

    Implementations could be S3, GCS, local disk, etc.
    Services depend on this interface, not the implementation.
    """

    @abstractmethod
    def write(self, *, path: str, data: bytes, content_type: str) -> None:
        """Store bytes at ``path``, overwriting any existing object.

        Raises:
            BlobStorageError: If the write fails
        """

    @abstractmethod
    def read(self, *, path: str) -> bytes:
        """Return the bytes stored at ``path``.

        Raises:
            NotFoundError: If nothing is stored at ``path``
            BlobStorageError: If the read fails
        """

    @abstractmethod
    def delete(self, *, path: str) -> None:
        """Delete the object at ``path``.

        Deleting a path that does not exist is not an error.

        Raises:
            BlobStorageError: If the delete fails
        """
