"""Data models for the GTO trainer."""

from gto_trainer.models.card import Card, Rank, Suit
from gto_trainer.models.action import Action
from gto_trainer.models.position import Position
from gto_trainer.models.hand import HandClass, StrengthTier

__all__ = [
    "Card", "Rank", "Suit",
    "Action",
    "Position",
    "HandClass", "StrengthTier",
]
