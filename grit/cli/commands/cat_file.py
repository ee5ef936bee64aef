"""Show the content of a stored object."""

import click
from grit.core.objects import ObjectKind
from grit.core.repository import Repository
from grit.core.errors import GritError
from grit.cli.output import error

KIND_NAMES = [kind.value for kind in ObjectKind]


@click.command('cat-file')
@click.argument('object_type', metavar='TYPE', type=click.Choice(KIND_NAMES, case_sensitive=False))
@click.argument('address')
def cat_file_cmd(object_type, address):
    """
    Print the raw content of an object.
    
    ADDRESS must be the full 40-character address. The object must be
    of kind TYPE.
    
    Examples:
        grit cat-file blob 3b18e512dba79e4c8300dd08aeb37f8e728b8dad
    """
    try:
        repo = Repository.discover()
        obj = repo.objects.read(address)
        expected = ObjectKind.from_name(object_type)
        if obj.kind is not expected:
            click.echo(error(f"Object {address} is a {obj.kind}, not a {expected}"))
            raise click.Abort()
        content = obj.serialize()
    except GritError as e:
        click.echo(error(f"cat-file failed: {e}"))
        raise click.Abort()
    
    click.echo(content, nl=False)
