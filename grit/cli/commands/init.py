"""Initialize a new grit repository."""

import click
from pathlib import Path
from grit.core.repository import Repository
from grit.core.errors import GritError
from grit.cli.output import success, error, info


@click.command('init')
@click.argument('path', default='.')
def init_cmd(path):
    """
    Initialize a new repository.
    
    Creates a .git directory holding the object database and config.
    The directory is created if it does not exist.
    
    Examples:
        grit init                    # Initialize in current directory
        grit init my-project         # Initialize in my-project directory
    """
    try:
        repo = Repository.init(Path(path))
    except GritError as e:
        click.echo(error(f"Failed to initialize repository: {e}"))
        raise click.Abort()
    
    click.echo(success(f"Initialized empty repository in {repo.git_dir}"))
    click.echo(info("  .git/objects/     - Object database"))
    click.echo(info("  .git/config       - Repository configuration"))
