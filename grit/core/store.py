"""Loose object storage under .git/objects."""

import logging
from pathlib import Path

from .compression import compress, decompress
from .errors import ObjectNotFoundError, StorageIOError
from .hash import hash_object, is_address
from .objects import GitObject, decode_object, encode_object
from .repository import stat_check

logger = logging.getLogger(__name__)


class ObjectStore:
    """
    Reads and writes objects in a repository's object directory.

    Objects are stored compressed with zlib at objects/<aa>/<rest>, where
    <aa> is the first two hex characters of the address.
    """

    def __init__(self, repo):
        """
        Initialize the store.

        Args:
            repo: Repository whose objects directory is used
        """
        self.repo = repo

    @staticmethod
    def address_of(obj: GitObject) -> str:
        """
        Compute the address of an object without touching the filesystem.

        Args:
            obj: Object to hash

        Returns:
            str: 40-character SHA-1 of the encoded record
        """
        return hash_object(encode_object(obj))

    def object_path(self, address: str, repo=None) -> Path:
        """
        Get filesystem path for an object.

        Example: objects/ab/cdef0123... for address abcdef0123...

        Args:
            address: 40-character SHA-1 hash
            repo: Repository to place the object in (defaults to the store's)

        Returns:
            Path: Full path to object file
        """
        repo = repo or self.repo
        return repo.repo_path('objects', address[:2], address[2:])

    def write(self, obj: GitObject) -> str:
        """
        Write object to its owning repository.

        Any existing file at the derived path is overwritten; since the
        address is derived from the content, rewriting an object stores
        identical bytes.

        Args:
            obj: Object to write; stored in obj.repo if set, else in the store's repository

        Returns:
            str: Address of the object

        Raises:
            ObjectKindNotImplementedError: If the object is not a blob
            StorageIOError: If the object file cannot be written
        """
        repo = obj.repo or self.repo
        record = encode_object(obj)
        address = hash_object(record)

        repo.repo_dir('objects', address[:2], mkdir=True)
        path = self.object_path(address, repo)
        try:
            path.write_bytes(compress(record))
        except OSError as e:
            raise StorageIOError(f"Cannot write object {address}: {e}", e) from e

        logger.debug("Wrote %s %s (%d bytes)", obj.type, address, len(obj.content))
        return address

    def read(self, address: str) -> GitObject:
        """
        Read object from the store's repository.

        Args:
            address: Full 40-character SHA-1 hash

        Returns:
            GitObject: Decoded object, owned by the store's repository

        Raises:
            ObjectNotFoundError: If no object file exists for address
            DecompressionError: If the stored stream is corrupt
            ObjectDecodeError: If the decompressed record is malformed
            StorageIOError: If the object file cannot be read
        """
        if not is_address(address):
            raise ObjectNotFoundError(address)

        path = self.object_path(address)
        if not stat_check(Path.is_file, path):
            raise ObjectNotFoundError(address)

        try:
            compressed = path.read_bytes()
        except OSError as e:
            raise StorageIOError(f"Cannot read object {address}: {e}", e) from e

        obj = decode_object(decompress(compressed), self.repo)
        logger.debug("Read %s %s (%d bytes)", obj.type, address, len(obj.content))
        return obj

    def exists(self, address: str) -> bool:
        """
        Check if object exists in repository.

        Args:
            address: 40-character SHA-1 hash

        Returns:
            bool: True if object exists
        """
        return is_address(address) and stat_check(Path.is_file, self.object_path(address))

    def __repr__(self) -> str:
        return f"ObjectStore(repo={self.repo.work_tree})"
