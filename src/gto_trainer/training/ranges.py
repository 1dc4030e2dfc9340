"""Preflop range table: every starting-hand class with its strength tier.

Borderline assignments (KTs, QTs, QTo, JTo) follow the source chart as
drawn and are intentionally left in the White tier.
"""

from typing import List, Tuple

from gto_trainer.models.hand import StrengthTier

ALL_HAND_RANGES: List[Tuple[str, StrengthTier]] = [
    # Pairs
    ("AA", StrengthTier.R_PURPLE),
    ("KK", StrengthTier.R_PURPLE),
    ("QQ", StrengthTier.R_PURPLE),
    ("JJ", StrengthTier.R_RED),
    ("TT", StrengthTier.R_RED),
    ("99", StrengthTier.R_YELLOW),
    ("88", StrengthTier.R_YELLOW),
    ("77", StrengthTier.R_GREEN),
    ("66", StrengthTier.R_GREEN),
    ("55", StrengthTier.R_CYAN),
    ("44", StrengthTier.R_CYAN),
    ("33", StrengthTier.R_CYAN),
    ("22", StrengthTier.R_WHITE),

    # Suited
    ("AKs", StrengthTier.R_PURPLE),
    ("AQs", StrengthTier.R_RED),
    ("AJs", StrengthTier.R_RED),
    ("ATs", StrengthTier.R_YELLOW),
    ("A9s", StrengthTier.R_GREEN),
    ("A8s", StrengthTier.R_GREEN),
    ("A7s", StrengthTier.R_GREEN),
    ("A6s", StrengthTier.R_GREEN),
    ("A5s", StrengthTier.R_CYAN),
    ("A4s", StrengthTier.R_CYAN),
    ("A3s", StrengthTier.R_CYAN),
    ("A2s", StrengthTier.R_CYAN),

    ("KQs", StrengthTier.R_RED),
    ("KJs", StrengthTier.R_YELLOW),
    ("KTs", StrengthTier.R_WHITE),
    ("K9s", StrengthTier.R_CYAN),
    ("K8s", StrengthTier.R_WHITE),
    ("K7s", StrengthTier.R_WHITE),
    ("K6s", StrengthTier.R_WHITE),
    ("K5s", StrengthTier.R_WHITE),
    ("K4s", StrengthTier.R_WHITE),
    ("K3s", StrengthTier.R_WHITE),
    ("K2s", StrengthTier.R_WHITE),

    ("QJs", StrengthTier.R_YELLOW),
    ("QTs", StrengthTier.R_WHITE),
    ("Q9s", StrengthTier.R_CYAN),
    ("Q8s", StrengthTier.R_WHITE),
    ("Q7s", StrengthTier.R_WHITE),
    ("Q6s", StrengthTier.R_WHITE),
    ("Q5s", StrengthTier.R_WHITE),
    ("Q4s", StrengthTier.R_WHITE),
    ("Q3s", StrengthTier.R_WHITE),
    ("Q2s", StrengthTier.R_WHITE),

    ("JTs", StrengthTier.R_YELLOW),
    ("J9s", StrengthTier.R_CYAN),
    ("J8s", StrengthTier.R_WHITE),
    ("J7s", StrengthTier.R_WHITE),
    ("J6s", StrengthTier.R_WHITE),
    ("J5s", StrengthTier.R_WHITE),
    ("J4s", StrengthTier.R_WHITE),
    ("J3s", StrengthTier.R_WHITE),
    ("J2s", StrengthTier.R_WHITE),

    ("T9s", StrengthTier.R_GREEN),
    ("T8s", StrengthTier.R_CYAN),
    ("T7s", StrengthTier.R_FOLD),
    ("T6s", StrengthTier.R_FOLD),
    ("T5s", StrengthTier.R_FOLD),
    ("T4s", StrengthTier.R_FOLD),
    ("T3s", StrengthTier.R_FOLD),
    ("T2s", StrengthTier.R_FOLD),

    ("98s", StrengthTier.R_GREEN),
    ("97s", StrengthTier.R_CYAN),
    ("96s", StrengthTier.R_FOLD),
    ("95s", StrengthTier.R_FOLD),
    ("94s", StrengthTier.R_FOLD),
    ("93s", StrengthTier.R_FOLD),
    ("92s", StrengthTier.R_FOLD),

    ("87s", StrengthTier.R_CYAN),
    ("86s", StrengthTier.R_FOLD),
    ("85s", StrengthTier.R_FOLD),
    ("84s", StrengthTier.R_FOLD),
    ("83s", StrengthTier.R_FOLD),
    ("82s", StrengthTier.R_FOLD),

    ("76s", StrengthTier.R_CYAN),
    ("75s", StrengthTier.R_FOLD),
    ("74s", StrengthTier.R_FOLD),
    ("73s", StrengthTier.R_FOLD),
    ("72s", StrengthTier.R_FOLD),

    ("65s", StrengthTier.R_CYAN),
    ("64s", StrengthTier.R_FOLD),
    ("63s", StrengthTier.R_FOLD),
    ("62s", StrengthTier.R_FOLD),

    ("54s", StrengthTier.R_WHITE),
    ("53s", StrengthTier.R_FOLD),
    ("52s", StrengthTier.R_FOLD),

    ("43s", StrengthTier.R_WHITE),
    ("42s", StrengthTier.R_FOLD),

    ("32s", StrengthTier.R_FOLD),

    # Offsuit
    ("AKo", StrengthTier.R_PURPLE),
    ("AQo", StrengthTier.R_RED),
    ("AJo", StrengthTier.R_GREEN),
    ("ATo", StrengthTier.R_CYAN),
    ("A9o", StrengthTier.R_FOLD),
    ("A8o", StrengthTier.R_FOLD),
    ("A7o", StrengthTier.R_FOLD),
    ("A6o", StrengthTier.R_FOLD),
    ("A5o", StrengthTier.R_FOLD),
    ("A4o", StrengthTier.R_FOLD),
    ("A3o", StrengthTier.R_FOLD),
    ("A2o", StrengthTier.R_FOLD),

    ("KQo", StrengthTier.R_YELLOW),
    ("KJo", StrengthTier.R_GREEN),
    ("KTo", StrengthTier.R_CYAN),
    ("K9o", StrengthTier.R_FOLD),
    ("K8o", StrengthTier.R_FOLD),
    ("K7o", StrengthTier.R_FOLD),
    ("K6o", StrengthTier.R_FOLD),
    ("K5o", StrengthTier.R_FOLD),
    ("K4o", StrengthTier.R_FOLD),
    ("K3o", StrengthTier.R_FOLD),
    ("K2o", StrengthTier.R_FOLD),

    ("QJo", StrengthTier.R_CYAN),
    ("QTo", StrengthTier.R_WHITE),
    ("Q9o", StrengthTier.R_FOLD),
    ("Q8o", StrengthTier.R_FOLD),
    ("Q7o", StrengthTier.R_FOLD),
    ("Q6o", StrengthTier.R_FOLD),
    ("Q5o", StrengthTier.R_FOLD),
    ("Q4o", StrengthTier.R_FOLD),
    ("Q3o", StrengthTier.R_FOLD),
    ("Q2o", StrengthTier.R_FOLD),

    ("JTo", StrengthTier.R_WHITE),
    ("J9o", StrengthTier.R_FOLD),
    ("J8o", StrengthTier.R_FOLD),
    ("J7o", StrengthTier.R_FOLD),
    ("J6o", StrengthTier.R_FOLD),
    ("J5o", StrengthTier.R_FOLD),
    ("J4o", StrengthTier.R_FOLD),
    ("J3o", StrengthTier.R_FOLD),
    ("J2o", StrengthTier.R_FOLD),

    ("T9o", StrengthTier.R_FOLD),
    ("T8o", StrengthTier.R_FOLD),
    ("T7o", StrengthTier.R_FOLD),
    ("T6o", StrengthTier.R_FOLD),
    ("T5o", StrengthTier.R_FOLD),
    ("T4o", StrengthTier.R_FOLD),
    ("T3o", StrengthTier.R_FOLD),
    ("T2o", StrengthTier.R_FOLD),

    ("98o", StrengthTier.R_FOLD),
    ("97o", StrengthTier.R_FOLD),
    ("96o", StrengthTier.R_FOLD),
    ("95o", StrengthTier.R_FOLD),
    ("94o", StrengthTier.R_FOLD),
    ("93o", StrengthTier.R_FOLD),
    ("92o", StrengthTier.R_FOLD),

    ("87o", StrengthTier.R_FOLD),
    ("86o", StrengthTier.R_FOLD),
    ("85o", StrengthTier.R_FOLD),
    ("84o", StrengthTier.R_FOLD),
    ("83o", StrengthTier.R_FOLD),
    ("82o", StrengthTier.R_FOLD),

    ("76o", StrengthTier.R_FOLD),
    ("75o", StrengthTier.R_FOLD),
    ("74o", StrengthTier.R_FOLD),
    ("73o", StrengthTier.R_FOLD),
    ("72o", StrengthTier.R_FOLD),

    ("65o", StrengthTier.R_FOLD),
    ("64o", StrengthTier.R_FOLD),
    ("63o", StrengthTier.R_FOLD),
    ("62o", StrengthTier.R_FOLD),

    ("54o", StrengthTier.R_FOLD),
    ("53o", StrengthTier.R_FOLD),
    ("52o", StrengthTier.R_FOLD),

    ("43o", StrengthTier.R_FOLD),
    ("42o", StrengthTier.R_FOLD),

    ("32o", StrengthTier.R_FOLD),
]
