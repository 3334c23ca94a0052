"""Commands: create and update use cases from JSON documents."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from usecasectl.commands._base import UcCommand
from usecasectl.services.result import ServiceResult

if TYPE_CHECKING:
    from usecasectl.commands._context import AppContext
    from usecasectl.domain.models import UseCase

_DOCUMENT = click.Path(exists=True, dir_okay=False, path_type=Path)


def _mutation_data(app: AppContext, use_case: UseCase) -> dict[str, str]:
    return {
        "id": use_case.id,
        "title": use_case.title,
        "path": str(app.settings.storage_directory / f"{use_case.id}.json"),
    }


@click.command(
    cls=UcCommand,
    examples="""\
  usecasectl create purchase-items.json
  usecasectl --json create purchase-items.json   # prints the assigned id""",
)
@click.argument("document", type=_DOCUMENT)
@click.pass_obj
def create(app: AppContext, document: Path) -> None:
    """Validate DOCUMENT and store it as a new use case.

    A blank "id" in the document is replaced with a generated one.
    """
    with app.reporting("create"):
        stored = app.service.create_use_case(app.read_document(document))
        app.emit(ServiceResult(ok=True, op="create", data=_mutation_data(app, stored)))


@click.command(
    cls=UcCommand,
    examples="""\
  usecasectl show <id> --json > uc.json   # edit, then:
  usecasectl update uc.json""",
)
@click.argument("document", type=_DOCUMENT)
@click.pass_obj
def update(app: AppContext, document: Path) -> None:
    """Validate DOCUMENT and replace the stored use case with the same id."""
    with app.reporting("update"):
        stored = app.service.update_use_case(app.read_document(document))
        app.emit(ServiceResult(ok=True, op="update", data=_mutation_data(app, stored)))
