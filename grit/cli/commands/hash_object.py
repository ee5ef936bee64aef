"""Compute an object address for a file, optionally storing it."""

import click
from grit.core.objects import GitObject, ObjectKind
from grit.core.repository import Repository
from grit.core.store import ObjectStore
from grit.core.errors import GritError
from grit.cli.output import error

KIND_NAMES = [kind.value for kind in ObjectKind]


@click.command('hash-object')
@click.option('-t', '--type', 'object_type', type=click.Choice(KIND_NAMES, case_sensitive=False),
              default='blob', show_default=True, help='Kind of object to create')
@click.option('-w', '--write', is_flag=True, help='Write the object into the repository')
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def hash_object_cmd(object_type, write, file):
    """
    Compute the address of FILE as an object.
    
    Without -w nothing is written and no repository is needed.
    
    Examples:
        grit hash-object notes.txt       # Print the blob address
        grit hash-object -w notes.txt    # Store the blob as well
    """
    try:
        kind = ObjectKind.from_name(object_type)
        repo = Repository.discover() if write else None
        obj = GitObject.from_file(file, repo=repo, kind=kind)
        if write:
            address = repo.objects.write(obj)
        else:
            address = ObjectStore.address_of(obj)
    except GritError as e:
        click.echo(error(f"hash-object failed: {e}"))
        raise click.Abort()
    
    click.echo(address)
