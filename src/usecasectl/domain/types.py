"""Goal level classification for use cases.

Canonical spellings are the enum values (``SUMMARY``, ``USER_GOAL``,
``SUBFUNCTION``). They are the only form accepted by the record schema
and the only form written to disk. Mixed-case names are display-only.
"""

from __future__ import annotations

from enum import StrEnum


class GoalLevel(StrEnum):
    """Scope tier of a use case."""

    SUMMARY = "SUMMARY"
    USER_GOAL = "USER_GOAL"
    SUBFUNCTION = "SUBFUNCTION"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def parse(cls, text: str) -> GoalLevel:
        """Resolve *text* case-insensitively to a member.

        Raises ``ValueError`` for anything other than a canonical spelling.

        Examples:
            >>> GoalLevel.parse("user_goal")
            <GoalLevel.USER_GOAL: 'USER_GOAL'>
        """
        try:
            return cls(text.strip().upper())
        except ValueError:
            msg = f"Unknown goal level: {text!r} (expected one of {', '.join(canonical_goal_levels())})"
            raise ValueError(msg) from None


_DISPLAY_NAMES: dict[GoalLevel, str] = {
    GoalLevel.SUMMARY: "Summary",
    GoalLevel.USER_GOAL: "User Goal",
    GoalLevel.SUBFUNCTION: "Subfunction",
}


def canonical_goal_levels() -> tuple[str, ...]:
    """Canonical spellings in declaration order."""
    return tuple(level.value for level in GoalLevel)
