"""Repository management for grit."""

import logging
import shutil
from pathlib import Path
from typing import Optional

from .config import Config, SUPPORTED_FORMAT_VERSION
from .errors import (
    AlreadyExistsError,
    ConfigParseError,
    MissingConfigError,
    NotARepositoryError,
    StorageIOError,
    UnsupportedVersionError,
)

logger = logging.getLogger(__name__)

GIT_DIR_NAME = '.git'

_EXTENDED_PATH_PREFIX = '\\\\?\\'
_EXTENDED_UNC_PREFIX = '\\\\?\\UNC\\'


def _clean_extended_prefix(path: Path) -> Path:
    """Strip a Windows \\\\?\\ extended-length prefix from a resolved path."""
    text = str(path)
    if text.startswith(_EXTENDED_UNC_PREFIX):
        return Path('\\\\' + text[len(_EXTENDED_UNC_PREFIX):])
    if text.startswith(_EXTENDED_PATH_PREFIX):
        return Path(text[len(_EXTENDED_PATH_PREFIX):])
    return path


def stat_check(test, path: Path) -> bool:
    """
    Run a pathlib existence test, reporting unexpected stat failures.

    Args:
        test: Unbound check such as Path.exists or Path.is_file
        path: Path to check

    Returns:
        bool: Result of the check

    Raises:
        StorageIOError: If the path cannot be examined (e.g. name too long, permission denied)
    """
    try:
        return test(path)
    except OSError as e:
        raise StorageIOError(f"Cannot access {path}: {e}", e) from e


class Repository:
    """
    Represents a grit repository.

    A repository is a lightweight handle on a work tree and its .git
    directory. It can be rebuilt from a path at any time and does not own
    either directory.
    """

    def __init__(self, path='.', config: Optional[Config] = None):
        """
        Initialize repository handle without validating anything.

        Use Repository.open, Repository.init or Repository.discover to get
        a checked handle.

        Args:
            path: Path to repository root (defaults to current directory)
            config: Loaded configuration
        """
        self.work_tree = Path(path).resolve()
        self.git_dir = self.work_tree / GIT_DIR_NAME
        self.objects_dir = self.git_dir / 'objects'
        self.config_file = self.git_dir / 'config'
        self.config = config if config is not None else Config()

        self._object_store = None

    @property
    def objects(self):
        """Get ObjectStore instance."""
        if self._object_store is None:
            from .store import ObjectStore
            self._object_store = ObjectStore(self)
        return self._object_store

    @classmethod
    def init(cls, path='.') -> 'Repository':
        """
        Initialize a new repository.

        Creates the .git directory structure:
        .git/
        ├── objects/       # Object database
        └── config         # Repository configuration

        Args:
            path: Work tree root; created if missing

        Returns:
            Repository: The newly created repository, opened and validated

        Raises:
            AlreadyExistsError: If path/.git already exists
            StorageIOError: If the directories or config cannot be created
        """
        work_tree = Path(path)
        git_dir = work_tree / GIT_DIR_NAME
        if stat_check(Path.exists, git_dir):
            raise AlreadyExistsError(f"Repository already exists at {git_dir}")

        try:
            git_dir.mkdir(parents=True)
        except OSError as e:
            raise StorageIOError(f"Cannot create repository at {git_dir}: {e}", e) from e

        try:
            (git_dir / 'objects').mkdir()
            Config.default().write(git_dir / 'config')
        except OSError as e:
            # no half-built .git may survive a failed init
            shutil.rmtree(git_dir, ignore_errors=True)
            raise StorageIOError(f"Cannot create repository at {git_dir}: {e}", e) from e

        logger.debug("Initialized repository in %s", git_dir)
        return cls.open(work_tree)

    @classmethod
    def open(cls, path='.', force: bool = False) -> 'Repository':
        """
        Open the repository whose work tree is path.

        Args:
            path: Work tree root (the directory containing .git)
            force: Skip all validation and return a best-effort handle

        Returns:
            Repository: Opened repository

        Raises:
            NotARepositoryError: If path/.git does not exist
            MissingConfigError: If .git/config does not exist
            ConfigParseError: If the config is unreadable or has no integer format version
            UnsupportedVersionError: If the format version is not 0
        """
        repo = cls(path)

        if not force and not stat_check(Path.exists, repo.git_dir):
            raise NotARepositoryError(f"Not a git repository: {repo.work_tree}")

        config = None
        if stat_check(Path.is_file, repo.config_file):
            try:
                config = Config.load(repo.config_file)
            except (ConfigParseError, StorageIOError) as e:
                if not force:
                    raise
                logger.warning("Ignoring unreadable config %s: %s", repo.config_file, e)
        elif not force:
            raise MissingConfigError(f"Config file not found: {repo.config_file}")

        if not force:
            version = config.repository_format_version()
            if version != SUPPORTED_FORMAT_VERSION:
                raise UnsupportedVersionError(version)

        if config is not None:
            repo.config = config
        return repo

    @classmethod
    def discover(cls, path='.') -> 'Repository':
        """
        Find repository by searching up the directory tree.

        Searches from the given path upwards until it finds a .git entry
        or reaches the filesystem root. Nothing is created along the way.

        Args:
            path: Starting path for search

        Returns:
            Repository: The nearest enclosing repository, opened and validated

        Raises:
            NotARepositoryError: If no directory on the way up contains .git
            StorageIOError: If path cannot be canonicalized
        """
        try:
            current = Path(path).resolve(strict=True)
        except OSError as e:
            raise StorageIOError(f"Cannot resolve {path}: {e}", e) from e
        current = _clean_extended_prefix(current)

        while True:
            if stat_check(Path.exists, current / GIT_DIR_NAME):
                logger.debug("Found repository at %s", current)
                return cls.open(current)

            # Reached filesystem root
            if current == current.parent:
                raise NotARepositoryError(f"Not a git repository (or any parent up to {current}): {path}")

            current = current.parent

    def repo_path(self, *parts) -> Path:
        """
        Get a path inside the .git directory.

        Args:
            *parts: Path components relative to .git

        Returns:
            Path: Joined path (not checked for existence)
        """
        return self.git_dir.joinpath(*parts)

    def repo_dir(self, *parts, mkdir: bool = False) -> Path:
        """
        Get a directory inside the .git directory.

        Args:
            *parts: Path components relative to .git
            mkdir: Create the directory (and parents) if missing

        Returns:
            Path: Existing directory

        Raises:
            StorageIOError: If the directory is missing and mkdir is False,
                or it cannot be created
        """
        path = self.repo_path(*parts)
        if stat_check(Path.is_dir, path):
            return path
        if not mkdir:
            raise StorageIOError(f"Directory does not exist in repository: {path}")
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageIOError(f"Cannot create directory {path}: {e}", e) from e
        return path

    def repo_file(self, *parts, mkdir: bool = False) -> Path:
        """
        Get a file path inside the .git directory.

        Args:
            *parts: Path components relative to .git
            mkdir: Create the parent directories if missing

        Returns:
            Path: File path; the file itself may not exist yet when mkdir is True

        Raises:
            StorageIOError: If the file is missing and mkdir is False
        """
        path = self.repo_path(*parts)
        if stat_check(Path.is_file, path):
            return path
        if not mkdir:
            raise StorageIOError(f"File does not exist in repository: {path}")
        self.repo_dir(*parts[:-1], mkdir=True)
        return path

    def __repr__(self) -> str:
        """String representation of repository."""
        return f"Repository(path={self.work_tree})"
