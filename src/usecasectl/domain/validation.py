"""Methodology rules for use-case documents.

Every rule is a pure function: it takes a value (and, for extensions, the
owning scenario) and returns a fresh :class:`ValidationResult`. No rule
raises for well-typed input, keeps state, or depends on earlier calls, so
the same input always yields an equal result in both create and edit
flows.

Rules accumulate every applicable error unless noted. The early returns
(empty input, a step with too few words, a missing extension or
scenario) are the only short-circuits.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from pydantic import BaseModel

from usecasectl.domain.models import Extension, Scenario, UseCase
from usecasectl.domain.types import GoalLevel, canonical_goal_levels


class ValidationError(BaseModel):
    """One rejected field, with an explanation and optional fix."""

    model_config = {"frozen": True}

    field: str
    message: str
    example: str | None = None


class ValidationResult(BaseModel):
    """Outcome of a validation call. Never mutated after construction."""

    model_config = {"frozen": True}

    valid: bool
    errors: tuple[ValidationError, ...] = ()

    @classmethod
    def from_errors(cls, errors: Iterable[ValidationError]) -> ValidationResult:
        collected = tuple(errors)
        return cls(valid=not collected, errors=collected)

    @classmethod
    def merge(cls, *results: ValidationResult) -> ValidationResult:
        """Concatenate the errors of *results* in order."""
        return cls.from_errors(err for result in results for err in result.errors)


# ---------------------------------------------------------------------------
# Lexicons
# ---------------------------------------------------------------------------

ACTION_VERBS: tuple[str, ...] = (
    "create",
    "update",
    "delete",
    "add",
    "remove",
    "send",
    "receive",
    "validate",
    "check",
    "confirm",
    "enter",
    "select",
    "click",
    "submit",
    "save",
    "load",
    "display",
    "show",
    "navigate",
    "open",
    "close",
    "start",
    "stop",
    "process",
    "calculate",
    "generate",
    "retrieve",
    "search",
    "filter",
    "sort",
    "export",
    "import",
)

# Whole word, optional "s"/"es" suffix, anywhere in the step.
_VERB_PATTERN = re.compile(
    r"\b(?:" + "|".join(ACTION_VERBS) + r")(?:s|es)?\b",
    re.IGNORECASE,
)

IMPERATIVE_VERBS: frozenset[str] = frozenset(ACTION_VERBS)

FUNCTION_KEYWORDS: tuple[str, ...] = ("manage", "maintain", "administer", "handle")

STATE_MARKERS: tuple[str, ...] = (" is ", " are ", " has ", " have ", " remains ", " exists ")

_TITLE_EXAMPLE = "Example: 'Purchase Items' or 'Register New User'"
_STEP_EXAMPLE = "Example: 'User enters login credentials' or 'System validates the input'"
_GUARANTEE_EXAMPLE = (
    "Example: 'User account is created and active' or 'Payment is recorded in the system'"
)


# Only ASCII whitespace separates words; NBSP and other Unicode spaces are
# part of a word. Trimming removes ASCII control characters and space.
_WORD_SEPARATOR = re.compile(r"[ \t\n\x0b\f\r]+")
_TRIM_CHARS = "".join(chr(code) for code in range(0x21))


def _trim(text: str) -> str:
    return text.strip(_TRIM_CHARS)


def _words(trimmed: str) -> list[str]:
    return _WORD_SEPARATOR.split(trimmed)


def _is_blank(text: str | None) -> bool:
    return text is None or not _trim(text)


def _goal_level_guidance() -> str:
    return f"Valid values: {', '.join(canonical_goal_levels())}"


# ---------------------------------------------------------------------------
# Field rules
# ---------------------------------------------------------------------------


def validate_title(title: str | None) -> ValidationResult:
    """A title names the actor's goal, in at least two words.

    Function-oriented wording (manage, maintain, administer, handle) is
    rejected; the check is a plain substring match on the lowercased
    text, so it also fires inside longer words.
    """
    if _is_blank(title):
        return ValidationResult.from_errors(
            [ValidationError(field="title", message="Title cannot be empty", example=_TITLE_EXAMPLE)]
        )

    assert title is not None
    trimmed = _trim(title)
    errors: list[ValidationError] = []

    lowered = trimmed.lower()
    if any(keyword in lowered for keyword in FUNCTION_KEYWORDS):
        errors.append(
            ValidationError(
                field="title",
                message=(
                    "Title appears to be function-oriented rather than goal-oriented. "
                    "Focus on what the user wants to achieve."
                ),
                example="Example: Instead of 'Manage Users', use 'Add New User' or 'Update User Profile'",
            )
        )

    if len(_words(trimmed)) < 2:
        errors.append(
            ValidationError(
                field="title",
                message="Title should be descriptive and express a clear goal",
                example=_TITLE_EXAMPLE,
            )
        )

    return ValidationResult.from_errors(errors)


def validate_goal_level(level: str | None) -> ValidationResult:
    """The level must be a canonical goal level spelling, in any case."""
    if _is_blank(level):
        return ValidationResult.from_errors(
            [
                ValidationError(
                    field="goalLevel",
                    message="Goal level cannot be empty",
                    example=_goal_level_guidance(),
                )
            ]
        )

    assert level is not None
    try:
        GoalLevel(_trim(level).upper())
    except ValueError:
        return ValidationResult.from_errors(
            [
                ValidationError(
                    field="goalLevel",
                    message=f"Goal level must be one of: {', '.join(canonical_goal_levels())}",
                    example=f"Example: {GoalLevel.USER_GOAL.value}",
                )
            ]
        )
    return ValidationResult.from_errors([])


def validate_step(step_text: str | None) -> ValidationResult:
    """A step reads ``"<actor> <verb> <object>"``.

    Fewer than three words is a format violation and ends the check.
    Otherwise the text must contain a recognized action verb.
    """
    if _is_blank(step_text):
        return ValidationResult.from_errors(
            [ValidationError(field="step", message="Step cannot be empty", example=_STEP_EXAMPLE)]
        )

    assert step_text is not None
    trimmed = _trim(step_text)
    if len(_words(trimmed)) < 3:
        return ValidationResult.from_errors(
            [
                ValidationError(
                    field="step",
                    message="Step should follow subject-verb-object format with an actor and action",
                    example=_STEP_EXAMPLE,
                )
            ]
        )

    errors: list[ValidationError] = []
    if _VERB_PATTERN.search(trimmed) is None:
        errors.append(
            ValidationError(
                field="step",
                message="Step should contain an action verb",
                example=_STEP_EXAMPLE,
            )
        )
    return ValidationResult.from_errors(errors)


def validate_extension(extension: Extension | None, main_scenario: Scenario | None) -> ValidationResult:
    """The branch point must fall within ``[1, max step number]``.

    The bound is the highest number stored on a main-scenario step, not
    the step count, and the branch point is not required to match an
    existing step.
    """
    if extension is None:
        return ValidationResult.from_errors(
            [ValidationError(field="extension", message="Extension cannot be null")]
        )

    if main_scenario is None or main_scenario.is_empty:
        return ValidationResult.from_errors(
            [
                ValidationError(
                    field="extension",
                    message="Cannot validate extension without a main scenario",
                )
            ]
        )

    max_step = main_scenario.max_step_number
    branch_point = extension.branch_point
    errors: list[ValidationError] = []
    if branch_point < 1 or branch_point > max_step:
        errors.append(
            ValidationError(
                field="extension",
                message=(
                    f"Extension branch point {branch_point} does not reference a valid step "
                    f"in the main scenario (1-{max_step})"
                ),
                example=f"Example: Use a step number between 1 and {max_step}",
            )
        )
    return ValidationResult.from_errors(errors)


def validate_success_guarantee(guarantee: str | None) -> ValidationResult:
    """A guarantee describes a resulting state, not an action.

    Two independent checks: the first word must not be an imperative verb,
    and the text must contain a state marker (is, are, has, have,
    remains, exists).
    """
    if _is_blank(guarantee):
        return ValidationResult.from_errors(
            [
                ValidationError(
                    field="successGuarantee",
                    message="Success guarantee cannot be empty",
                    example=_GUARANTEE_EXAMPLE,
                )
            ]
        )

    assert guarantee is not None
    trimmed = _trim(guarantee)
    errors: list[ValidationError] = []

    first_word = _words(trimmed)[0].lower()
    if first_word in IMPERATIVE_VERBS:
        errors.append(
            ValidationError(
                field="successGuarantee",
                message=(
                    "Success guarantee should be stated as a condition (describing a state), "
                    "not an action"
                ),
                example="Example: Instead of 'Create user account', use 'User account is created and active'",
            )
        )

    lowered = trimmed.lower()
    if not any(marker in lowered for marker in STATE_MARKERS):
        errors.append(
            ValidationError(
                field="successGuarantee",
                message=(
                    "Success guarantee should describe a state using words like "
                    "'is', 'are', 'has', 'have', 'remains', or 'exists'"
                ),
                example=_GUARANTEE_EXAMPLE,
            )
        )

    return ValidationResult.from_errors(errors)


# ---------------------------------------------------------------------------
# Whole document
# ---------------------------------------------------------------------------


def validate_use_case(use_case: UseCase | None) -> ValidationResult:
    """Run every field rule over *use_case* and concatenate the errors.

    Traversal order: title, goal level, main-scenario steps, extensions,
    success guarantees.
    """
    if use_case is None:
        return ValidationResult.from_errors(
            [ValidationError(field="useCase", message="Use case cannot be null")]
        )

    results = [validate_title(use_case.title)]

    # The enum type already guarantees a valid spelling; only presence is checked.
    if use_case.goal_level is None:
        results.append(
            ValidationResult.from_errors(
                [
                    ValidationError(
                        field="goalLevel",
                        message="Goal level cannot be null",
                        example=_goal_level_guidance(),
                    )
                ]
            )
        )

    results.extend(validate_step(step.text) for step in use_case.main_scenario.steps)
    results.extend(
        validate_extension(extension, use_case.main_scenario) for extension in use_case.extensions
    )
    results.extend(validate_success_guarantee(g) for g in use_case.success_guarantees)

    return ValidationResult.merge(*results)
