"""Hash utilities tests."""

import pytest
from grit.core.hash import hash_object, hash_file, is_address
import tempfile
from pathlib import Path


def test_hash_object_empty():
    """Test hashing empty bytes."""
    result = hash_object(b'')
    assert result == 'da39a3ee5e6b4b0d3255bfef95601890afd80709'


def test_hash_object_deterministic():
    """Test hash consistency for same input."""
    data = b'hello world'
    assert hash_object(data) == hash_object(data)


def test_hash_object_different_data():
    """Test different data produces different hashes."""
    assert hash_object(b'hello') != hash_object(b'world')


def test_hash_object_is_lowercase_hex():
    result = hash_object(b'blob 16\0Not real content')
    assert result == 'f704b93e1eb2c92ed45dd0403887f6869c776c8f'
    assert is_address(result)


def test_hash_file():
    """Test hashing file contents."""
    with tempfile.NamedTemporaryFile(mode='wb', delete=False) as f:
        f.write(b'test content')
        temp_path = f.name
    
    try:
        assert hash_file(temp_path) == hash_object(b'test content')
    finally:
        Path(temp_path).unlink()


@pytest.mark.parametrize('text', [
    '',
    'f704b93',
    'F704B93E1EB2C92ED45DD0403887F6869C776C8F',
    'g704b93e1eb2c92ed45dd0403887f6869c776c8f',
    'f704b93e1eb2c92ed45dd0403887f6869c776c8f0',
    '../../../../../../../../../../etc/passwd',
])
def test_is_address_rejects(text):
    assert not is_address(text)
