"""Hand catalog — the fixed set of 169 starting-hand classes."""

import logging
import random
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from gto_trainer import config
from gto_trainer.models.hand import HandClass, StrengthTier
from gto_trainer.training.ranges import ALL_HAND_RANGES

logger = logging.getLogger(__name__)

# Dealt when the catalog has nothing to draw from
FALLBACK_HAND = HandClass("AA", StrengthTier.R_PURPLE)


class HandCatalog:
    """Immutable collection of starting-hand classes with uniform draws.

    The entries are frozen at construction. Draws go through ``rng`` when
    one is given (useful for seeding), otherwise through the module-level
    ``random`` functions shared by the process.
    """

    def __init__(self, entries: Iterable[HandClass],
                 rng: Optional[random.Random] = None):
        self._hands: Tuple[HandClass, ...] = tuple(entries)
        self._by_label: Dict[str, HandClass] = {}
        for hand in self._hands:
            if hand.label in self._by_label:
                raise ValueError(f"Duplicate hand label: {hand.label}")
            self._by_label[hand.label] = hand
        self._rng = rng

    @classmethod
    def from_ranges(cls, ranges: Iterable[Tuple[str, StrengthTier]],
                    rng: Optional[random.Random] = None) -> "HandCatalog":
        """Build a catalog from (label, tier) pairs."""
        return cls((HandClass(label, tier) for label, tier in ranges), rng=rng)

    def all_hands(self) -> Tuple[HandClass, ...]:
        return self._hands

    def random_hand(self) -> HandClass:
        """Draw one hand uniformly at random.

        An empty catalog yields FALLBACK_HAND instead of raising.
        """
        if not self._hands:
            logger.warning("Hand catalog is empty, dealing fallback hand %s",
                           FALLBACK_HAND.label)
            return FALLBACK_HAND
        choice = self._rng.choice if self._rng is not None else random.choice
        return choice(self._hands)

    def lookup(self, label: str) -> HandClass:
        """Find a hand by label. Input is normalized first ('kas' -> 'AKs').

        Raises:
            ValueError: If the label cannot be parsed.
            KeyError: If the label is well-formed but not in the catalog.
        """
        normalized = HandClass.normalize_label(label)
        try:
            return self._by_label[normalized]
        except KeyError:
            raise KeyError(f"Hand not in catalog: {normalized}") from None

    def by_tier(self, tier: StrengthTier) -> List[HandClass]:
        return [h for h in self._hands if h.tier == tier]

    def tier_counts(self) -> Dict[StrengthTier, int]:
        counts = {tier: 0 for tier in StrengthTier}
        for hand in self._hands:
            counts[hand.tier] += 1
        return counts

    def __len__(self) -> int:
        return len(self._hands)

    def __iter__(self) -> Iterator[HandClass]:
        return iter(self._hands)

    def __contains__(self, label: object) -> bool:
        return label in self._by_label

    def __repr__(self) -> str:
        return f"HandCatalog(hands={len(self._hands)})"


DEFAULT_CATALOG = HandCatalog.from_ranges(
    ALL_HAND_RANGES,
    rng=random.Random(config.SEED) if config.SEED is not None else None,
)


def all_hands() -> Tuple[HandClass, ...]:
    """All 169 starting-hand classes in table order."""
    return DEFAULT_CATALOG.all_hands()


def random_hand() -> HandClass:
    """Uniformly drawn starting-hand class from the default catalog."""
    return DEFAULT_CATALOG.random_hand()
