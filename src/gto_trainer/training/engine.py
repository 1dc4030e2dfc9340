"""Decision engine — judges a preflop action against the position/tier table.

The correct action depends only on two integers: the hand's tier rank H
(0-6) and the seat's base strength P (1-5).

- UTG (opening seat): Open if H >= P and H > 0, else Fold.
- Other seats: Fold if H == 0 or H < P; otherwise H - P of 0 is Open,
  1 is Call and 2+ is Raise.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from gto_trainer.models.action import Action
from gto_trainer.models.hand import StrengthTier
from gto_trainer.models.position import Position
from gto_trainer.training.catalog import DEFAULT_CATALOG, HandCatalog

logger = logging.getLogger(__name__)

CORRECT_MESSAGE = "Correct!"


class InvalidArgumentError(ValueError):
    """Raised when an engine input is not a member of its enumeration."""


@dataclass(frozen=True)
class EvaluationResult:
    """Outcome of judging one user decision."""
    is_correct: bool
    correct_action: Action
    message: str


def _require(value: object, enum_type: type, name: str) -> None:
    if not isinstance(value, enum_type):
        raise InvalidArgumentError(
            f"{name} must be a {enum_type.__name__}, got {value!r}"
        )


def correct_action(position: Position, tier: StrengthTier) -> Action:
    """Return the single correct action for a seat and hand tier."""
    _require(position, Position, "position")
    _require(tier, StrengthTier, "tier")

    h = tier.rank
    p = position.base_strength

    if position.is_opening:
        # Nothing to call or raise yet
        if h >= p and h > 0:
            return Action.OPEN
        return Action.FOLD

    diff = h - p
    if h == 0:
        return Action.FOLD
    if h < p:
        return Action.FOLD
    if diff == 0:
        return Action.OPEN
    if diff == 1:
        return Action.CALL
    if diff >= 2:
        return Action.RAISE
    return Action.FOLD


def evaluate(position: Position, tier: StrengthTier,
             user_action: Action) -> EvaluationResult:
    """Judge the user's action for a seat and hand tier.

    Raises:
        InvalidArgumentError: If any argument is outside its enumeration.
    """
    _require(user_action, Action, "user_action")
    expected = correct_action(position, tier)
    is_correct = user_action == expected

    logger.debug("evaluate %s/%s user=%s correct=%s",
                 position.value, tier.value, user_action.value, expected.value)

    if is_correct:
        message = CORRECT_MESSAGE
    else:
        message = f"Wrong! Correct was {expected.value}"

    return EvaluationResult(
        is_correct=is_correct,
        correct_action=expected,
        message=message,
    )


def strategy_chart(position: Position,
                   catalog: Optional[HandCatalog] = None) -> Dict[str, Action]:
    """Map every hand label to its correct action for one seat."""
    if catalog is None:
        catalog = DEFAULT_CATALOG
    return {hand.label: correct_action(position, hand.tier) for hand in catalog}
