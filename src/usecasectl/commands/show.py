"""Command: display one use case."""

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
  usecasectl show 3f2b8c1e-8d0a-4c55-9a61-0f1f4a1c2d3e
  usecasectl --json show 3f2b8c1e-8d0a-4c55-9a61-0f1f4a1c2d3e""",
)
@click.argument("use_case_id")
@click.pass_obj
def show(app: AppContext, use_case_id: str) -> None:
    """Show the full use case stored under USE_CASE_ID."""
    with app.reporting("show"):
        use_case = app.service.load_use_case(use_case_id)
        app.emit(
            ServiceResult(
                ok=True,
                op="show",
                data={"id": use_case.id, "use_case": use_case.model_dump(mode="json", by_alias=True)},
            )
        )
