"""Command: list stored use cases."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from usecasectl.commands._base import UcCommand
from usecasectl.services.result import ServiceResult

if TYPE_CHECKING:
    from usecasectl.commands._context import AppContext


@click.command(
    "list",
    cls=UcCommand,
    examples="""\
  usecasectl list
  usecasectl --json list
  usecasectl -v list    # include ids""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List use cases, sorted by title (case-insensitive)."""
    with app.reporting("list"):
        use_cases = app.service.list_use_cases()
        items = [
            {
                "id": uc.id,
                "title": uc.title,
                "primary_actor": uc.primary_actor,
                "goal_level": uc.goal_level.value,
            }
            for uc in use_cases
        ]
        app.emit(ServiceResult(ok=True, op="list", data={"count": len(items), "items": items}))
