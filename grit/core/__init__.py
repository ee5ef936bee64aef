"""Core functionality for grit.

This module contains the object storage subsystem:
- Objects and the on-disk record codec
- Repository discovery and validation
- Configuration loading
- Hashing and compression
- The loose object store
- The exception hierarchy

For the command line interface, see grit.cli
"""

from grit.core.objects import ObjectKind, GitObject, encode_object, decode_object
from grit.core.repository import Repository
from grit.core.store import ObjectStore
from grit.core.hash import hash_object, hash_file, is_address
from grit.core.compression import compress, decompress
from grit.core.config import Config

__all__ = [
    'ObjectKind',
    'GitObject',
    'encode_object',
    'decode_object',
    'Repository',
    'ObjectStore',
    'Config',
    'hash_object',
    'hash_file',
    'is_address',
    'compress',
    'decompress',
]
