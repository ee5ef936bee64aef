"""zlib compression applied to every object record stored on disk."""

import zlib

from .errors import DecompressionError


def compress(data: bytes) -> bytes:
    """
    Compress an encoded object record for storage.

    Args:
        data: Uncompressed record

    Returns:
        bytes: zlib stream
    """
    return zlib.compress(data)


def decompress(data: bytes) -> bytes:
    """
    Decompress a stored object record.

    The whole input must be exactly one complete zlib stream; truncated
    input or bytes after the end of the stream are rejected rather than
    returning partial content.

    Args:
        data: zlib stream read from an object file

    Returns:
        bytes: Uncompressed record

    Raises:
        DecompressionError: If the stream is corrupt, truncated or followed by garbage
    """
    decompressor = zlib.decompressobj()
    try:
        result = decompressor.decompress(data)
        result += decompressor.flush()
    except zlib.error as e:
        raise DecompressionError(f"Corrupt object stream: {e}") from e

    if not decompressor.eof:
        raise DecompressionError("Truncated object stream")
    if decompressor.unused_data:
        raise DecompressionError(
            f"Unexpected {len(decompressor.unused_data)} bytes after end of object stream"
        )
    return result
