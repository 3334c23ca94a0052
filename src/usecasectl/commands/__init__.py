"""Subcommand modules for usecasectl.

register_commands() defers imports so ``usecasectl --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the lint group and the standalone record commands."""
    from usecasectl.commands.lint import lint

    cli.add_command(lint)

    from usecasectl.commands.delete import delete
    from usecasectl.commands.list_cmd import list_cmd
    from usecasectl.commands.show import show
    from usecasectl.commands.validate import validate
    from usecasectl.commands.write import create, update

    cli.add_command(list_cmd)
    cli.add_command(show)
    cli.add_command(create)
    cli.add_command(update)
    cli.add_command(delete)
    cli.add_command(validate)
