from .board import CARD_TOTAL, NUM_FINAL_PILES, Board, SolitaireBoard, card_total_for
from .encoding import ConfigError, parse_config

__all__ = [
    "CARD_TOTAL",
    "NUM_FINAL_PILES",
    "Board",
    "SolitaireBoard",
    "card_total_for",
    "ConfigError",
    "parse_config",
]
