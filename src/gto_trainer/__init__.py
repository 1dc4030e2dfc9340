"""GTO Trainer — preflop position/hand-strength drilling tool."""

__version__ = "0.1.0"
