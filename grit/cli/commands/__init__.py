"""CLI commands for grit."""

from grit.cli.commands.init import init_cmd
from grit.cli.commands.cat_file import cat_file_cmd
from grit.cli.commands.hash_object import hash_object_cmd

__all__ = ['init_cmd', 'cat_file_cmd', 'hash_object_cmd']
