"""grit - A content-addressed object store in the style of Git."""

__version__ = '0.1.0'

from grit.core.repository import Repository
from grit.core.objects import ObjectKind, GitObject
from grit.core.store import ObjectStore

__all__ = [
    'Repository',
    'ObjectKind',
    'GitObject',
    'ObjectStore',
]
