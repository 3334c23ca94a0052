"""Command: check a use-case document without storing it."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from usecasectl.commands._base import UcCommand
from usecasectl.errors import ValidationFailedError
from usecasectl.services.result import ServiceResult

if TYPE_CHECKING:
    from usecasectl.commands._context import AppContext


@click.command(
    cls=UcCommand,
    examples="""\
  usecasectl validate purchase-items.json
  usecasectl --json validate purchase-items.json""",
)
@click.argument("document", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_obj
def validate(app: AppContext, document: Path) -> None:
    """Schema-check and methodology-check DOCUMENT."""
    from usecasectl.domain.validation import validate_use_case

    with app.reporting("validate"):
        use_case = app.read_document(document)
        result = validate_use_case(use_case)
        if not result.valid:
            raise ValidationFailedError(f"{document.name} failed validation", result.errors)
        app.emit(ServiceResult(ok=True, op="validate", data={"id": use_case.id, "valid": True}))
