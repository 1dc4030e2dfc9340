"""Hand catalog, decision engine and drill rounds."""

from gto_trainer.training.catalog import (
    DEFAULT_CATALOG, FALLBACK_HAND, HandCatalog, all_hands, random_hand,
)
from gto_trainer.training.engine import (
    EvaluationResult, InvalidArgumentError, correct_action, evaluate, strategy_chart,
)
from gto_trainer.training.session import DrillSession, RoundState

__all__ = [
    "DEFAULT_CATALOG", "FALLBACK_HAND", "HandCatalog", "all_hands", "random_hand",
    "EvaluationResult", "InvalidArgumentError", "correct_action", "evaluate",
    "strategy_chart",
    "DrillSession", "RoundState",
]
