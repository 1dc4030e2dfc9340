"""Output formatting for terminal and tables."""

from gto_trainer.formatters.text import TextFormatter
from gto_trainer.formatters.table import TableFormatter

__all__ = ["TextFormatter", "TableFormatter"]
