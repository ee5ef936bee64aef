"""Object model and the on-disk record codec.

Every object is stored as a single record:

    <type> <length>\\0<content>

where <type> is the lowercase kind name and <length> the decimal byte count
of <content>. Only blob bodies are defined; tree, commit and tag objects
travel through the codec as opaque envelopes.
"""

from enum import Enum
from pathlib import Path

from .errors import (
    LengthDelimiterNotFoundError,
    LengthNotNumericError,
    ObjectKindNotImplementedError,
    SizeMismatchError,
    StorageIOError,
    TypeDelimiterNotFoundError,
    UnrecognizedTypeError,
)


class ObjectKind(Enum):
    """Closed set of object kinds, valued by their wire names."""

    COMMIT = 'commit'
    TREE = 'tree'
    BLOB = 'blob'
    TAG = 'tag'

    @classmethod
    def from_name(cls, name: str) -> 'ObjectKind':
        """
        Look up a kind by name, ignoring case.

        Args:
            name: Kind name such as 'blob' or 'Blob'

        Returns:
            ObjectKind: Matching kind

        Raises:
            UnrecognizedTypeError: If name is not a known kind
        """
        try:
            return cls(name.lower())
        except ValueError:
            raise UnrecognizedTypeError(name) from None

    def __str__(self) -> str:
        return self.value


class GitObject:
    """
    A typed payload addressed by the hash of its encoded record.

    The owning repository is only used to work out where the object is
    stored; it plays no part in encoding or hashing.
    """

    def __init__(self, kind: ObjectKind, content: bytes = b'', repo=None):
        """
        Initialize an object.

        Args:
            kind: Object kind
            content: Raw body bytes
            repo: Owning Repository, if any
        """
        self.kind = kind
        self.content = bytes(content)
        self.repo = repo

    @property
    def type(self) -> str:
        """Wire name of the object kind."""
        return self.kind.value

    def serialize(self) -> bytes:
        """
        Return the object body as it appears after the record header.

        Raises:
            ObjectKindNotImplementedError: For tree, commit and tag objects
        """
        if self.kind is ObjectKind.BLOB:
            return self.content
        raise ObjectKindNotImplementedError(self.kind)

    def deserialize(self, data: bytes) -> None:
        """
        Replace the object body with data.

        Raises:
            ObjectKindNotImplementedError: For tree, commit and tag objects
        """
        if self.kind is ObjectKind.BLOB:
            self.content = bytes(data)
            return
        raise ObjectKindNotImplementedError(self.kind)

    @classmethod
    def blob(cls, data: bytes, repo=None) -> 'GitObject':
        """Create a blob holding data."""
        return cls(ObjectKind.BLOB, data, repo)

    @classmethod
    def from_file(cls, filepath, repo=None, kind: ObjectKind = ObjectKind.BLOB) -> 'GitObject':
        """
        Create an object from the content of an external file.

        Args:
            filepath: Path to file
            repo: Owning Repository, if any
            kind: Object kind (only blobs can later be encoded)

        Returns:
            GitObject: New object containing the file content

        Raises:
            StorageIOError: If the file cannot be read
        """
        try:
            data = Path(filepath).read_bytes()
        except OSError as e:
            raise StorageIOError(f"Cannot read {filepath}: {e}", e) from e
        obj = cls(kind, repo=repo)
        obj.content = data
        return obj

    def __eq__(self, other) -> bool:
        if not isinstance(other, GitObject):
            return NotImplemented
        return self.kind is other.kind and self.content == other.content

    def __hash__(self) -> int:
        return hash((self.kind, self.content))

    def __repr__(self) -> str:
        """String representation."""
        return f"GitObject(kind={self.kind.value}, size={len(self.content)})"


def encode_object(obj: GitObject) -> bytes:
    """
    Encode an object into its canonical record.

    Args:
        obj: Object to encode

    Returns:
        bytes: b'<type> <length>\\0<content>'

    Raises:
        ObjectKindNotImplementedError: If the object is not a blob
    """
    body = obj.serialize()
    header = f"{obj.kind.value} {len(body)}\0".encode('ascii')
    return header + body


def decode_object(data: bytes, repo=None) -> GitObject:
    """
    Decode a canonical record back into an object.

    Checks run in a fixed order so malformed input always reports the
    earliest problem: type delimiter, length delimiter, numeric length,
    content size, then type name.

    Args:
        data: Uncompressed record
        repo: Repository that will own the decoded object

    Returns:
        GitObject: Decoded object

    Raises:
        ObjectDecodeError: Subclass describing the first structural problem found
    """
    space = data.find(b' ')
    if space < 0:
        raise TypeDelimiterNotFoundError()

    null = data.find(b'\0', space)
    if null < 0:
        raise LengthDelimiterNotFoundError()

    length_field = data[space + 1:null]
    # bytes.isdigit() only accepts ASCII digits, so signs and whitespace are rejected
    if not length_field.isdigit():
        raise LengthNotNumericError(length_field.decode('ascii', errors='replace'))
    try:
        length = int(length_field)
    except ValueError:
        # more digits than int() accepts
        raise LengthNotNumericError(length_field[:20].decode('ascii') + '...') from None

    content = data[null + 1:]
    if len(content) != length:
        raise SizeMismatchError(length, len(content))

    kind = ObjectKind.from_name(data[:space].decode('ascii', errors='replace'))
    return GitObject(kind, content, repo)
