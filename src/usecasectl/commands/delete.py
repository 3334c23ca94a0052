"""Command: delete a use case after confirmation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from usecasectl.commands._base import UcCommand
from usecasectl.services.result import ServiceResult

if TYPE_CHECKING:
    from usecasectl.commands._context import AppContext


@click.command(
    cls=UcCommand,
    examples="""\
  usecasectl delete 3f2b8c1e-8d0a-4c55-9a61-0f1f4a1c2d3e
  usecasectl delete 3f2b8c1e-8d0a-4c55-9a61-0f1f4a1c2d3e --yes""",
)
@click.argument("use_case_id")
@click.option("-y", "--yes", is_flag=True, help="Delete without asking.")
@click.pass_obj
def delete(app: AppContext, use_case_id: str, yes: bool) -> None:
    """Delete the use case stored under USE_CASE_ID.

    Declining the prompt leaves the record untouched.
    """
    with app.reporting("delete"):
        use_case = app.service.load_use_case(use_case_id)

        warnings: list[str] = []
        if yes:
            confirmed = True
        elif app.settings.no_interact:
            confirmed = False
            warnings.append("Not deleted: pass --yes to delete in non-interactive mode")
        else:
            confirmed = click.confirm(
                f"Delete use case '{use_case.title}' ({use_case.id})?", default=False
            )

        if confirmed:
            app.service.delete_use_case(use_case_id)
        app.emit(
            ServiceResult(
                ok=True,
                op="delete",
                data={"id": use_case_id, "title": use_case.title, "deleted": confirmed},
                warnings=warnings,
            )
        )
