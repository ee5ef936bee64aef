"""Hash utilities for grit."""

import hashlib
import re

ADDRESS_LENGTH = 40

_ADDRESS_RE = re.compile(r'[0-9a-f]{40}')


def hash_object(data: bytes) -> str:
    """
    Compute SHA-1 hash of data.
    
    Args:
        data: Bytes to hash (an encoded object record, header included)
        
    Returns:
        40-character lowercase hex string
    """
    return hashlib.sha1(data).hexdigest()


def hash_file(filepath: str) -> str:
    """
    Compute SHA-1 hash of file.
    
    Args:
        filepath: Path to file
        
    Returns:
        40-character hex string
    """
    with open(filepath, 'rb') as f:
        return hash_object(f.read())


def is_address(text: str) -> bool:
    """Return True if text is a full object address (40 lowercase hex characters)."""
    return isinstance(text, str) and _ADDRESS_RE.fullmatch(text) is not None
