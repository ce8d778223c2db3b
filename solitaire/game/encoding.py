"""
Text parsing helpers for Bulgarian Solitaire configurations.

A configuration is written the same way the board displays it: pile sizes as
a space-separated list of positive integers, e.g. ``"20 5 1 9 10"``.
"""

from __future__ import annotations

import re
from typing import List

from .board import CARD_TOTAL


class ConfigError(ValueError):
    """Raised when text does not describe a valid initial configuration."""


def parse_config(text: str, total_cards: int = CARD_TOTAL) -> List[int]:
    """Parse a space-separated list of pile sizes.

    Every token must be a positive integer and the sizes must sum to
    total_cards. Any bad token rejects the whole line; nothing read before it
    is kept.
    """
    error = ConfigError(
        "ERROR: Each pile must have at least one card and the total number of cards must be "
        f"{total_cards}"
    )
    piles: List[int] = []
    for token in text.split():
        if re.fullmatch(r"[+-]?[0-9]+", token) is None:
            raise error
        size = int(token)
        if size <= 0:
            raise error
        piles.append(size)

    if sum(piles) != total_cards:
        raise error
    return piles
