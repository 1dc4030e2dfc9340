"""Drill session — the round state machine around the decision engine."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from gto_trainer.models.action import Action
from gto_trainer.models.hand import HandClass
from gto_trainer.models.position import Position
from gto_trainer.training.catalog import DEFAULT_CATALOG, HandCatalog
from gto_trainer.training.engine import EvaluationResult, evaluate

logger = logging.getLogger(__name__)


class RoundState(Enum):
    """Where the current round stands."""
    IDLE = "idle"
    AWAITING_ACTION = "awaiting_action"
    AWAITING_ADVANCE = "awaiting_advance"


@dataclass(frozen=True)
class RoundRecord:
    """One answered round, kept in memory for the session summary."""
    hand: HandClass
    position: Position
    user_action: Action
    result: EvaluationResult


@dataclass
class PositionTally:
    correct: int = 0
    total: int = 0

    @property
    def accuracy(self) -> float:
        if self.total == 0:
            return 0.0
        return self.correct / self.total


class DrillSession:
    """Owns the mutable round state the engine itself never holds.

    Workflow:
    1. ``deal()`` draws a hand (IDLE -> AWAITING_ACTION)
    2. ``submit()`` judges the player's action exactly once
    3. A correct answer returns to IDLE straight away; a wrong one waits
       in AWAITING_ADVANCE until ``advance()`` is called
    """

    def __init__(self, position: Position = Position.UTG,
                 catalog: Optional[HandCatalog] = None):
        self.position = position
        self.catalog = catalog if catalog is not None else DEFAULT_CATALOG
        self.state = RoundState.IDLE
        self.current_hand: Optional[HandClass] = None
        self.last_result: Optional[EvaluationResult] = None
        self.history: List[RoundRecord] = []

    def deal(self) -> HandClass:
        """Start a new round with a freshly drawn hand."""
        if self.state != RoundState.IDLE:
            raise RuntimeError(f"Cannot deal while {self.state.value}")
        self.current_hand = self.catalog.random_hand()
        self.last_result = None
        self.state = RoundState.AWAITING_ACTION
        logger.debug("Dealt %s at %s", self.current_hand.label, self.position.value)
        return self.current_hand

    def submit(self, action: Action) -> EvaluationResult:
        """Judge the player's action for the current hand.

        Raises:
            RuntimeError: If no hand is waiting for an answer.
        """
        if self.state != RoundState.AWAITING_ACTION or self.current_hand is None:
            raise RuntimeError(f"No hand awaiting action (state: {self.state.value})")

        result = evaluate(self.position, self.current_hand.tier, action)
        self.last_result = result
        self.history.append(RoundRecord(
            hand=self.current_hand,
            position=self.position,
            user_action=action,
            result=result,
        ))

        if result.is_correct:
            self.state = RoundState.IDLE
        else:
            self.state = RoundState.AWAITING_ADVANCE
        return result

    def advance(self) -> bool:
        """Leave a wrong answer behind. Returns False if there was nothing to advance."""
        if self.state != RoundState.AWAITING_ADVANCE:
            return False
        self.state = RoundState.IDLE
        return True

    def change_position(self, position: Position) -> HandClass:
        """Switch seats and deal a new hand, abandoning any open round."""
        self.position = position
        self.state = RoundState.IDLE
        return self.deal()

    @property
    def total_count(self) -> int:
        return len(self.history)

    @property
    def correct_count(self) -> int:
        return sum(1 for r in self.history if r.result.is_correct)

    @property
    def accuracy(self) -> float:
        if not self.history:
            return 0.0
        return self.correct_count / self.total_count

    @property
    def results_by_position(self) -> Dict[Position, PositionTally]:
        """Per-seat tallies, in seat order, for seats that were played."""
        tallies: Dict[Position, PositionTally] = {}
        for pos in Position:
            records = [r for r in self.history if r.position == pos]
            if not records:
                continue
            tallies[pos] = PositionTally(
                correct=sum(1 for r in records if r.result.is_correct),
                total=len(records),
            )
        return tallies

    @property
    def mistakes(self) -> List[RoundRecord]:
        return [r for r in self.history if not r.result.is_correct]
