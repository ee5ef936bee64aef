"""Object model and record codec tests."""

import pytest
import tempfile
from pathlib import Path
from grit.core.objects import GitObject, ObjectKind, encode_object, decode_object
from grit.core.errors import (
    LengthDelimiterNotFoundError,
    LengthNotNumericError,
    ObjectDecodeError,
    ObjectKindNotImplementedError,
    SizeMismatchError,
    StorageIOError,
    TypeDelimiterNotFoundError,
    UnrecognizedTypeError,
)


def test_blob_creation():
    """Test blob creation with data."""
    blob = GitObject.blob(b'hello world')
    assert blob.content == b'hello world'
    assert blob.kind is ObjectKind.BLOB
    assert blob.type == 'blob'
    assert blob.repo is None


def test_encode_blob():
    blob = GitObject.blob(b'Not real content')
    assert encode_object(blob) == b'blob 16\0Not real content'


def test_encode_empty_blob():
    assert encode_object(GitObject.blob(b'')) == b'blob 0\0'


@pytest.mark.parametrize('content', [
    b'',
    b'test content',
    b'\0\0 \0 binary \xff\xfe',
    b'blob 3\0abc',
])
def test_blob_roundtrip(content):
    """Test encode/decode cycle keeps content intact."""
    decoded = decode_object(encode_object(GitObject.blob(content)))
    assert decoded.kind is ObjectKind.BLOB
    assert decoded.content == content


def test_decode_attaches_repo():
    marker = object()
    decoded = decode_object(b'blob 1\0a', marker)
    assert decoded.repo is marker


@pytest.mark.parametrize('name', ['blob', 'Blob', 'BLOB'])
def test_decode_type_is_case_insensitive(name):
    decoded = decode_object(name.encode() + b' 3\0abc')
    assert decoded.kind is ObjectKind.BLOB


def test_decode_size_mismatch():
    with pytest.raises(SizeMismatchError) as exc_info:
        decode_object(b'X 1\0ab')
    assert exc_info.value.expected == 1
    assert exc_info.value.actual == 2


def test_decode_missing_space():
    with pytest.raises(TypeDelimiterNotFoundError):
        decode_object(b'blob4\0tree')


def test_decode_unrecognized_type():
    with pytest.raises(UnrecognizedTypeError) as exc_info:
        decode_object(b'oddtype 1\0a')
    assert exc_info.value.name == 'oddtype'


def test_decode_missing_null():
    with pytest.raises(LengthDelimiterNotFoundError):
        decode_object(b'blob 4tree')


def test_decode_null_before_space_is_not_the_terminator():
    # The NUL must come after the type delimiter
    with pytest.raises(LengthDelimiterNotFoundError):
        decode_object(b'bl\0ob 4')


@pytest.mark.parametrize('data', [
    b'blob \0',
    b'blob x\0a',
    b'blob -1\0',
    b'blob +1\0a',
    b'blob  1\0a',
])
def test_decode_length_not_numeric(data):
    with pytest.raises(LengthNotNumericError):
        decode_object(data)


def test_decode_errors_share_base_class():
    with pytest.raises(ObjectDecodeError):
        decode_object(b'')


def test_decode_reports_earliest_problem():
    # Non-numeric length wins over the unknown type name
    with pytest.raises(LengthNotNumericError):
        decode_object(b'oddtype x\0a')


@pytest.mark.parametrize('kind', [ObjectKind.TREE, ObjectKind.COMMIT, ObjectKind.TAG])
def test_non_blob_bodies_are_not_implemented(kind):
    obj = GitObject(kind, b'anything')
    with pytest.raises(ObjectKindNotImplementedError):
        encode_object(obj)
    with pytest.raises(ObjectKindNotImplementedError):
        obj.deserialize(b'other')
    with pytest.raises(NotImplementedError):
        obj.serialize()


def test_decode_non_blob_envelope():
    decoded = decode_object(b'tree 4\0abcd')
    assert decoded.kind is ObjectKind.TREE
    assert decoded.content == b'abcd'
    with pytest.raises(ObjectKindNotImplementedError):
        decoded.serialize()


def test_object_kind_from_name():
    assert ObjectKind.from_name('Commit') is ObjectKind.COMMIT
    assert str(ObjectKind.TAG) == 'tag'
    with pytest.raises(UnrecognizedTypeError):
        ObjectKind.from_name('branch')


def test_object_equality_ignores_repo():
    assert GitObject.blob(b'same', repo=object()) == GitObject.blob(b'same')
    assert GitObject.blob(b'same') != GitObject(ObjectKind.TREE, b'same')
    assert GitObject.blob(b'a') != GitObject.blob(b'b')


def test_blob_from_file():
    """Test blob creation from file."""
    with tempfile.NamedTemporaryFile(mode='wb', delete=False) as f:
        f.write(b'file content')
        temp_path = f.name
    
    try:
        blob = GitObject.from_file(temp_path)
        assert blob.kind is ObjectKind.BLOB
        assert blob.content == b'file content'
    finally:
        Path(temp_path).unlink()


def test_from_missing_file(temp_dir):
    with pytest.raises(StorageIOError):
        GitObject.from_file(temp_dir / 'missing.txt')


def test_decode_length_too_long_for_int():
    with pytest.raises(LengthNotNumericError):
        decode_object(b'blob ' + b'9' * 5000 + b'\0abc')
