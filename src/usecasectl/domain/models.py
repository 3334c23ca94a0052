"""Immutable use-case value types.

Every type is a frozen pydantic model: collections are stored as tuples,
equality is structural, and ``hash()`` is stable across nested values.
Python code uses snake_case field names; the camelCase aliases are the
record format written by :mod:`usecasectl.infrastructure.serializer`.

INVARIANT: A ``None`` for any required field is rejected at construction
with ``ValueError``. That is a structural guard only; methodology rules
(vague titles, malformed steps, ...) live in
:mod:`usecasectl.domain.validation`.

An edit is a new ``UseCase`` that reuses the original ``id``; use
:meth:`UseCaseBuilder.from_use_case` to seed one.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Self

from pydantic import BaseModel, StrictInt
from pydantic.alias_generators import to_camel

from usecasectl.domain.types import GoalLevel

_MODEL_CONFIG: Any = {
    "frozen": True,
    "alias_generator": to_camel,
    "populate_by_name": True,
}


class Step(BaseModel):
    """One numbered actor/action line of a scenario.

    Step numbers are caller-assigned. Nothing here checks that they are
    sequential or unique, but they must be real ints: bools and numeric
    strings are rejected.
    """

    model_config = _MODEL_CONFIG

    number: StrictInt
    actor: str
    action: str

    @property
    def text(self) -> str:
        """The ``"<actor> <action>"`` form checked by step validation."""
        return f"{self.actor} {self.action}"

    def __str__(self) -> str:
        return f"{self.number}. {self.text}"


class Scenario(BaseModel):
    """An ordered sequence of steps."""

    model_config = _MODEL_CONFIG

    steps: tuple[Step, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.steps

    @property
    def max_step_number(self) -> int:
        """Highest step number stored on any step (0 when empty)."""
        return max((step.number for step in self.steps), default=0)


class Extension(BaseModel):
    """An alternate path that branches from a main-scenario step."""

    model_config = _MODEL_CONFIG

    condition: str
    branch_point: StrictInt
    steps: tuple[Step, ...] = ()


class UseCase(BaseModel):
    """A complete use-case document.

    ``id`` is assigned once and never changes; frozen models make that
    structural.
    """

    model_config = _MODEL_CONFIG

    id: str
    title: str
    primary_actor: str
    goal_level: GoalLevel
    design_scope: str
    trigger: str
    preconditions: tuple[str, ...] = ()
    postconditions: tuple[str, ...] = ()
    success_guarantees: tuple[str, ...] = ()
    main_scenario: Scenario
    extensions: tuple[Extension, ...] = ()
    stakeholders: tuple[str, ...] = ()

    def __str__(self) -> str:
        return f"{self.title} [{self.goal_level.display_name}] ({self.id})"


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------

_REQUIRED_FIELDS = ("id", "title", "primary_actor", "goal_level", "design_scope", "trigger")


class UseCaseBuilder:
    """Staged accumulation of a :class:`UseCase`.

    Setters return the builder so calls chain. :meth:`build` performs the
    required-field checks and returns the immutable value; the builder
    itself can keep accumulating afterwards without affecting it.

    Usage::

        uc = (
            UseCaseBuilder()
            .id("uc-1")
            .title("Purchase Items")
            .primary_actor("Customer")
            .goal_level("user_goal")
            .design_scope("Online Store")
            .trigger("Customer opens the cart")
            .add_step(1, "Customer", "selects items to purchase")
            .build()
        )
    """

    def __init__(self) -> None:
        self._fields: dict[str, Any] = dict.fromkeys(_REQUIRED_FIELDS)
        self._preconditions: list[str] = []
        self._postconditions: list[str] = []
        self._success_guarantees: list[str] = []
        self._steps: list[Step] = []
        self._extensions: list[Extension] = []
        self._stakeholders: list[str] = []

    @classmethod
    def from_use_case(cls, use_case: UseCase) -> Self:
        """Seed a builder with every field of *use_case*, including its id."""
        builder = cls()
        builder._fields.update(
            id=use_case.id,
            title=use_case.title,
            primary_actor=use_case.primary_actor,
            goal_level=use_case.goal_level,
            design_scope=use_case.design_scope,
            trigger=use_case.trigger,
        )
        builder._preconditions = list(use_case.preconditions)
        builder._postconditions = list(use_case.postconditions)
        builder._success_guarantees = list(use_case.success_guarantees)
        builder._steps = list(use_case.main_scenario.steps)
        builder._extensions = list(use_case.extensions)
        builder._stakeholders = list(use_case.stakeholders)
        return builder

    # --- scalar fields ---

    def id(self, value: str) -> Self:
        self._fields["id"] = value
        return self

    def title(self, value: str) -> Self:
        self._fields["title"] = value
        return self

    def primary_actor(self, value: str) -> Self:
        self._fields["primary_actor"] = value
        return self

    def goal_level(self, value: GoalLevel | str) -> Self:
        """Set the goal level; strings are parsed case-insensitively."""
        if isinstance(value, str) and not isinstance(value, GoalLevel):
            value = GoalLevel.parse(value)
        self._fields["goal_level"] = value
        return self

    def design_scope(self, value: str) -> Self:
        self._fields["design_scope"] = value
        return self

    def trigger(self, value: str) -> Self:
        self._fields["trigger"] = value
        return self

    # --- collections ---

    def preconditions(self, values: Iterable[str]) -> Self:
        self._preconditions = list(values)
        return self

    def add_precondition(self, value: str) -> Self:
        self._preconditions.append(value)
        return self

    def postconditions(self, values: Iterable[str]) -> Self:
        self._postconditions = list(values)
        return self

    def add_postcondition(self, value: str) -> Self:
        self._postconditions.append(value)
        return self

    def success_guarantees(self, values: Iterable[str]) -> Self:
        self._success_guarantees = list(values)
        return self

    def add_success_guarantee(self, value: str) -> Self:
        self._success_guarantees.append(value)
        return self

    def main_scenario(self, scenario: Scenario) -> Self:
        self._steps = list(scenario.steps)
        return self

    def add_step(self, number: int, actor: str, action: str) -> Self:
        self._steps.append(Step(number=number, actor=actor, action=action))
        return self

    def extensions(self, values: Iterable[Extension]) -> Self:
        self._extensions = list(values)
        return self

    def add_extension(self, extension: Extension) -> Self:
        self._extensions.append(extension)
        return self

    def stakeholders(self, values: Iterable[str]) -> Self:
        self._stakeholders = list(values)
        return self

    def add_stakeholder(self, value: str) -> Self:
        self._stakeholders.append(value)
        return self

    def build(self) -> UseCase:
        """Return the accumulated :class:`UseCase`.

        Raises ``ValueError`` naming the first required field still unset.
        """
        for name in _REQUIRED_FIELDS:
            if self._fields[name] is None:
                msg = f"{name} cannot be None"
                raise ValueError(msg)
        return UseCase(
            **self._fields,
            preconditions=self._preconditions,
            postconditions=self._postconditions,
            success_guarantees=self._success_guarantees,
            main_scenario=Scenario(steps=self._steps),
            extensions=self._extensions,
            stakeholders=self._stakeholders,
        )
