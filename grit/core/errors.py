"""Exceptions raised by the grit object store."""


class GritError(Exception):
    """Base exception for grit."""

    pass


class StorageIOError(GritError):
    """Raised when a filesystem operation fails for a reason not classified elsewhere."""

    def __init__(self, message: str, cause: Exception = None):
        super().__init__(message)
        self.cause = cause


# Repository validation

class RepositoryError(GritError):
    """Base class for repository layout and configuration problems."""

    pass


class AlreadyExistsError(RepositoryError):
    """Raised when init targets a directory that already holds a .git directory."""

    pass


class NotARepositoryError(RepositoryError):
    """Raised when no .git directory is found."""

    pass


class MissingConfigError(RepositoryError):
    """Raised when .git/config does not exist."""

    pass


class ConfigParseError(RepositoryError):
    """Raised when the config cannot be parsed or lacks a usable format version."""

    pass


class UnsupportedVersionError(RepositoryError):
    """Raised when core.repositoryformatversion is anything but 0."""

    def __init__(self, version: int):
        super().__init__(f"Unsupported repository format version: {version} (only 0 is supported)")
        self.version = version


# Object decoding

class ObjectDecodeError(GritError):
    """Base class for malformed encoded object records."""

    pass


class TypeDelimiterNotFoundError(ObjectDecodeError):
    """Raised when the space ending the type name is missing."""

    def __init__(self):
        super().__init__("ASCII space not found after object type")


class LengthDelimiterNotFoundError(ObjectDecodeError):
    """Raised when the NUL byte ending the length field is missing."""

    def __init__(self):
        super().__init__("ASCII NUL not found after object length")


class LengthNotNumericError(ObjectDecodeError):
    """Raised when the length field is not a decimal number."""

    def __init__(self, text: str):
        super().__init__(f"Object length is not a decimal number: {text!r}")
        self.text = text


class UnrecognizedTypeError(ObjectDecodeError):
    """Raised when the type name is not commit, tree, blob or tag."""

    def __init__(self, name: str):
        super().__init__(f"Object type not recognized: {name!r}")
        self.name = name


class SizeMismatchError(ObjectDecodeError):
    """Raised when the declared length differs from the actual content length."""

    def __init__(self, expected: int, actual: int):
        super().__init__(f"Object size mismatch: header says {expected}, content has {actual}")
        self.expected = expected
        self.actual = actual


# Storage

class ObjectNotFoundError(GritError):
    """Raised when no object is stored at an address."""

    def __init__(self, address: str):
        super().__init__(f"Object {address} not found")
        self.address = address


class DecompressionError(GritError):
    """Raised when a stored object is not a complete zlib stream."""

    pass


class ObjectKindNotImplementedError(GritError, NotImplementedError):
    """Raised when the body of a tree, commit or tag would have to be interpreted."""

    def __init__(self, kind):
        super().__init__(f"{kind} objects are not supported yet (only blob bodies are defined)")
        self.kind = kind
