"""Command group: check a single field against the methodology rules."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import click

from usecasectl.commands._base import UcGroup
from usecasectl.domain.validation import (
    ValidationResult,
    validate_goal_level,
    validate_step,
    validate_success_guarantee,
    validate_title,
)
from usecasectl.errors import ValidationFailedError
from usecasectl.services.result import ServiceResult

if TYPE_CHECKING:
    from usecasectl.commands._context import AppContext


def _run_rule(
    app: AppContext,
    field: str,
    words: tuple[str, ...],
    rule: Callable[[str], ValidationResult],
) -> None:
    text = " ".join(words)
    with app.reporting("lint"):
        result = rule(text)
        if not result.valid:
            raise ValidationFailedError(f"{field} failed validation", result.errors)
        app.emit(ServiceResult(ok=True, op="lint", data={"field": field, "text": text, "valid": True}))


@click.group(
    cls=UcGroup,
    examples="""\
  usecasectl lint title Purchase Items
  usecasectl lint step User enters login credentials
  usecasectl lint goal-level user_goal
  usecasectl lint guarantee 'Order is recorded and paid'""",
)
def lint() -> None:
    """Check one field of a use case before writing the document."""


@lint.command(examples="  usecasectl lint title Register New User")
@click.argument("words", nargs=-1, required=True)
@click.pass_obj
def title(app: AppContext, words: tuple[str, ...]) -> None:
    """Check that a title is goal-oriented."""
    _run_rule(app, "title", words, validate_title)


@lint.command(examples="  usecasectl lint step System validates the input")
@click.argument("words", nargs=-1, required=True)
@click.pass_obj
def step(app: AppContext, words: tuple[str, ...]) -> None:
    """Check that a step reads "<actor> <verb> <object>"."""
    _run_rule(app, "step", words, validate_step)


@lint.command("goal-level", examples="  usecasectl lint goal-level SUBFUNCTION")
@click.argument("words", nargs=-1, required=True)
@click.pass_obj
def goal_level(app: AppContext, words: tuple[str, ...]) -> None:
    """Check that a goal level is SUMMARY, USER_GOAL, or SUBFUNCTION."""
    _run_rule(app, "goalLevel", words, validate_goal_level)


@lint.command(examples='  usecasectl lint guarantee "Payment is recorded in the system"')
@click.argument("words", nargs=-1, required=True)
@click.pass_obj
def guarantee(app: AppContext, words: tuple[str, ...]) -> None:
    """Check that a success guarantee describes a state."""
    _run_rule(app, "successGuarantee", words, validate_success_guarantee)
