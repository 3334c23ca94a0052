"""Shared pytest fixtures and test helpers for usecasectl tests."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from usecasectl.domain.models import Extension, Scenario, Step, UseCase, UseCaseBuilder
from usecasectl.domain.types import GoalLevel
from usecasectl.infrastructure.repository import UseCaseRepository
from usecasectl.infrastructure.serializer import Serializer
from usecasectl.services.usecase import UseCaseService


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_environment(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Keep every test away from the real home directory and config files."""
    env_root = tmp_path_factory.mktemp("env")
    home = env_root / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("USECASECTL_CONFIG", raising=False)
    monkeypatch.delenv("USECASECTL_STORAGE__DIRECTORY", raising=False)
    work = env_root / "work"
    work.mkdir()
    monkeypatch.chdir(work)


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Undo the root handler swap performed by ``configure_logging``."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    uc = logging.getLogger("usecasectl")
    uc_level = uc.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    uc.setLevel(uc_level)


@pytest.fixture
def storage_dir(tmp_path: Path) -> Path:
    """Directory the repository under test owns."""
    return tmp_path / "store"


@pytest.fixture
def serializer() -> Serializer:
    return Serializer()


@pytest.fixture
def repository(storage_dir: Path, serializer: Serializer) -> UseCaseRepository:
    return UseCaseRepository(storage_dir, serializer)


@pytest.fixture
def service(repository: UseCaseRepository) -> UseCaseService:
    return UseCaseService(repository)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_use_case(**overrides: Any) -> UseCase:
    """A methodology-valid use case; keyword overrides replace fields."""
    fields: dict[str, Any] = {
        "id": "uc-purchase",
        "title": "Purchase Items",
        "primary_actor": "Customer",
        "goal_level": GoalLevel.USER_GOAL,
        "design_scope": "Online Store",
        "trigger": "Customer decides to buy the items in the cart",
        "preconditions": ("Customer is logged in",),
        "postconditions": ("Order is stored",),
        "success_guarantees": ("Order is recorded and payment is captured",),
        "main_scenario": Scenario(
            steps=(
                Step(number=1, actor="Customer", action="selects items to purchase"),
                Step(number=2, actor="System", action="calculates the order total"),
                Step(number=3, actor="Customer", action="submits payment details"),
                Step(number=4, actor="System", action="confirms the order"),
            )
        ),
        "extensions": (
            Extension(
                condition="Payment is declined",
                branch_point=3,
                steps=(Step(number=1, actor="System", action="displays a payment error"),),
            ),
        ),
        "stakeholders": ("Customer", "Store Owner"),
    }
    fields.update(overrides)
    return UseCase(**fields)


def builder_for(**overrides: Any) -> UseCaseBuilder:
    """A builder seeded from :func:`make_use_case`."""
    return UseCaseBuilder.from_use_case(make_use_case(**overrides))


def write_document(path: Path, use_case: UseCase) -> Path:
    """Write *use_case* as a JSON document at *path*."""
    path.write_text(Serializer().serialize(use_case), encoding="utf-8")
    return path


# Mixed alphabet for generated text: ASCII, punctuation, control characters,
# Unicode spaces, combining marks, CJK, and astral-plane emoji. Lone
# surrogates are left out since they have no UTF-8 form.
_TEXT_ALPHABET = (
    "abcXYZ019 .,;:'\"\\/{}[]"
    "\x00\x07\t\n\r\x1b\x7f"
    "\u00a0\u2028\u200b\u3000"
    "\u00e9\u00df\u00f1\u0301\u6f22\u5b57\u30ab\u30ca"
    "\U0001f642\U0001f680"
)


def random_text(rng: random.Random, *, max_length: int = 12) -> str:
    """Arbitrary text, empty about one time in six."""
    if rng.randrange(6) == 0:
        return ""
    return "".join(rng.choice(_TEXT_ALPHABET) for _ in range(rng.randint(1, max_length)))


def random_steps(rng: random.Random, *, max_steps: int = 5) -> tuple[Step, ...]:
    """Steps with sparse, repeated, zero, or negative numbers."""
    return tuple(
        Step(number=rng.randint(-5, 40), actor=random_text(rng), action=random_text(rng))
        for _ in range(rng.randint(0, max_steps))
    )


def random_use_case(rng: random.Random, **overrides: Any) -> UseCase:
    """An arbitrary structurally valid use case (not necessarily methodology-valid)."""

    def texts() -> tuple[str, ...]:
        return tuple(random_text(rng) for _ in range(rng.randint(0, 3)))

    fields: dict[str, Any] = {
        "id": random_text(rng),
        "title": random_text(rng),
        "primary_actor": random_text(rng),
        "goal_level": rng.choice(list(GoalLevel)),
        "design_scope": random_text(rng),
        "trigger": random_text(rng),
        "preconditions": texts(),
        "postconditions": texts(),
        "success_guarantees": texts(),
        "main_scenario": Scenario(steps=random_steps(rng)),
        "extensions": tuple(
            Extension(
                condition=random_text(rng),
                branch_point=rng.randint(-3, 45),
                steps=random_steps(rng, max_steps=3),
            )
            for _ in range(rng.randint(0, 4))
        ),
        "stakeholders": texts(),
    }
    fields.update(overrides)
    return UseCase(**fields)
