"""Repository configuration for grit.

The repository config lives in .git/config in INI format, like Git:

    [core]
        repositoryformatversion = 0
        filemode = false
        bare = false

Once loaded, a Config is only read. Environment variables of the form
GRIT_<SECTION>_<KEY> take precedence over file values for lookups, but the
repository format version is always validated from the file itself.
"""

import os
import configparser
from pathlib import Path
from typing import Optional, Dict

from .errors import ConfigParseError, StorageIOError

SUPPORTED_FORMAT_VERSION = 0

DEFAULTS = {
    'core': {
        'repositoryformatversion': str(SUPPORTED_FORMAT_VERSION),
        'filemode': 'false',
        'bare': 'false',
    },
}


def _new_parser() -> configparser.ConfigParser:
    # No interpolation: values are stored verbatim, '%' included
    return configparser.ConfigParser(interpolation=None)


class Config:
    """
    Read-only view of a repository configuration file.
    """

    def __init__(self, parser: Optional[configparser.ConfigParser] = None, path: Optional[Path] = None):
        """
        Initialize Config.

        Args:
            parser: Parsed configuration, or None for an empty config
            path: File the configuration was loaded from, if any
        """
        self._parser = parser if parser is not None else _new_parser()
        self.path = path

    @classmethod
    def load(cls, path) -> 'Config':
        """
        Load configuration from an INI file.

        Args:
            path: Path to config file

        Returns:
            Config: Loaded configuration

        Raises:
            ConfigParseError: If the file is not valid INI text
            StorageIOError: If the file cannot be read
        """
        path = Path(path)
        try:
            text = path.read_text(encoding='utf-8')
        except UnicodeDecodeError as e:
            raise ConfigParseError(f"Failed to load config {path}: {e}") from e
        except OSError as e:
            raise StorageIOError(f"Cannot read config {path}: {e}", e) from e

        parser = _new_parser()
        try:
            parser.read_string(text, source=str(path))
        except configparser.Error as e:
            raise ConfigParseError(f"Failed to load config {path}: {e}") from e
        return cls(parser, path)

    @classmethod
    def default(cls) -> 'Config':
        """Return the configuration written by init."""
        parser = _new_parser()
        parser.read_dict(DEFAULTS)
        return cls(parser)

    def get(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        """
        Get a configuration value.

        Priority order (highest to lowest):
        1. Environment variables (GRIT_<SECTION>_<KEY>)
        2. Config file
        3. Fallback value

        Args:
            section: Config section (e.g., 'core')
            key: Config key (e.g., 'bare')
            fallback: Default value if not found

        Returns:
            Configuration value or fallback
        """
        env_key = f"GRIT_{section.upper()}_{key.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return env_value

        if self._parser.has_option(section, key):
            return self._parser.get(section, key)

        return fallback

    def getint(self, section: str, key: str, fallback: Optional[int] = None) -> Optional[int]:
        """Get a value as an integer; raises ValueError if it is not one."""
        value = self.get(section, key)
        if value is None:
            return fallback
        return int(value)

    def getboolean(self, section: str, key: str, fallback: Optional[bool] = None) -> Optional[bool]:
        """Get a value as a boolean, using configparser's notion of true/false."""
        value = self.get(section, key)
        if value is None:
            return fallback
        try:
            return self._parser.BOOLEAN_STATES[value.lower()]
        except KeyError:
            raise ValueError(f"Not a boolean: {value}") from None

    def has_option(self, section: str, key: str) -> bool:
        """Return True if the file defines section.key."""
        return self._parser.has_option(section, key)

    def sections(self) -> list:
        """Return the section names defined in the file."""
        return self._parser.sections()

    def list_all(self) -> Dict[str, Dict[str, str]]:
        """
        List all configuration values.

        Returns:
            Dict of sections to key-value dicts
        """
        return {
            section: dict(self._parser.items(section))
            for section in self._parser.sections()
        }

    def repository_format_version(self) -> int:
        """
        Return core.repositoryformatversion as read from the file.

        Raises:
            ConfigParseError: If the key is absent or not an integer
        """
        if not self._parser.has_option('core', 'repositoryformatversion'):
            raise ConfigParseError("Unable to find core.repositoryformatversion in config")
        value = self._parser.get('core', 'repositoryformatversion')
        try:
            return int(value)
        except ValueError:
            raise ConfigParseError(
                f"core.repositoryformatversion is not an integer: {value!r}"
            ) from None

    def write(self, path) -> None:
        """
        Write configuration to an INI file.

        Args:
            path: Destination path
        """
        with open(path, 'w', encoding='utf-8') as f:
            self._parser.write(f)

    def __repr__(self) -> str:
        return f"Config(path={self.path})"
