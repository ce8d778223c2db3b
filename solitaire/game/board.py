"""
Board and round rules for Bulgarian Solitaire.

This module implements:
- A partially-filled, fixed-capacity pile store (one slot per card in play)
- Explicit and random construction
- The round transition: one card off every pile, collected into a new last pile
- Terminal detection: exactly the piles 1, 2, ..., final_pile_count in any order

The game only terminates when the card total is triangular, so the total is
always derived from the final pile count rather than configured directly.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import numpy as np


NUM_FINAL_PILES: int = 9
CARD_TOTAL: int = NUM_FINAL_PILES * (NUM_FINAL_PILES + 1) // 2

logger = logging.getLogger(__name__)


def card_total_for(final_pile_count: int) -> int:
    """Closed form of 1 + 2 + ... + final_pile_count."""
    return final_pile_count * (final_pile_count + 1) // 2


class SolitaireBoard:
    """Mutable board for one game of Bulgarian Solitaire.

    Representation invariant:
        - 0 <= pile_count <= total_cards
        - _piles[0:pile_count] holds the pile sizes, each in [1, total_cards]
        - the occupied sizes sum to total_cards
        - _piles[pile_count:] is unused tail capacity and kept at zero

    The store has total_cards slots, which covers the worst case of every
    pile holding a single card.
    """

    def __init__(self, piles: Sequence[int], final_pile_count: int = NUM_FINAL_PILES) -> None:
        """Create a board with the configuration in piles.

        PRE: piles is a sequence of positive integers that sum to total_cards.
        Only the final pile count and the store length are checked here; the
        full invariant is asserted once the store is filled.
        """
        if final_pile_count < 1:
            raise ValueError(f"final_pile_count must be at least 1, got {final_pile_count}")
        self.final_pile_count = final_pile_count
        self.total_cards = card_total_for(final_pile_count)
        self._piles = np.zeros(self.total_cards, dtype=np.int64)

        if len(piles) > self.total_cards:
            raise ValueError(
                f"Too many piles: {len(piles)} for a board of {self.total_cards} cards"
            )

        self.pile_count = 0
        for size in piles:
            if size <= 0:
                break
            self._piles[self.pile_count] = size
            self.pile_count += 1

        logger.info("Initial configuration: %s", self.config_string())
        assert self.is_valid(), f"Invalid board after construction: {list(piles)}"

    # ------------------------- Construction helpers ------------------------- #
    @staticmethod
    def from_config(piles: Sequence[int], final_pile_count: int = NUM_FINAL_PILES) -> "SolitaireBoard":
        return SolitaireBoard(piles, final_pile_count)

    @staticmethod
    def random(
        rng: Optional[np.random.Generator] = None,
        final_pile_count: int = NUM_FINAL_PILES,
    ) -> "SolitaireBoard":
        """Create a board with a random initial configuration.

        Each pile size is drawn uniformly from [1, remaining] until no cards
        remain, so the sizes always sum to the card total.
        """
        generator = rng if rng is not None else np.random.default_rng()
        remaining = card_total_for(final_pile_count)
        piles: List[int] = []
        while remaining > 0:
            size = int(generator.integers(1, remaining, endpoint=True))
            piles.append(size)
            remaining -= size
        return SolitaireBoard(piles, final_pile_count)

    # ----------------------------- Query methods ---------------------------- #
    def piles(self) -> List[int]:
        """Return a copy of the occupied pile sizes, in order."""
        return [int(x) for x in self._piles[: self.pile_count]]

    def is_done(self) -> bool:
        """Return True iff the piles are 1, 2, ..., final_pile_count in any order.

        With exactly final_pile_count piles and no repeated size, the sizes are
        final_pile_count distinct positive integers summing to
        1 + 2 + ... + final_pile_count, which only {1, ..., final_pile_count} does.
        """
        if self.pile_count != self.final_pile_count:
            return False

        seen = set()
        duplicates = 0
        for size in self._piles[: self.pile_count]:
            size = int(size)
            if size in seen:
                duplicates += 1
            else:
                seen.add(size)
        return duplicates == 0

    def config_string(self) -> str:
        """Space-separated pile sizes with no leading or trailing spaces."""
        return " ".join(str(int(x)) for x in self._piles[: self.pile_count])

    def is_valid(self) -> bool:
        """Check the representation invariant without asserting."""
        if self.pile_count < 0 or self.pile_count > len(self._piles):
            return False
        occupied = self._piles[: self.pile_count]
        if np.any(occupied <= 0) or np.any(occupied > self.total_cards):
            return False
        return int(occupied.sum()) == self.total_cards

    # --------------------------- Round application -------------------------- #
    def play_round(self) -> None:
        """Play one round in place.

        Takes one card from each pile and puts them together in a new pile at
        the end. Piles left empty disappear; the others keep their relative
        order. Runs in time linear in the pile count, using the unused tail of
        the store as scratch space instead of a second buffer.
        """
        capacity = len(self._piles)
        old_count = self.pile_count
        occupied = self._piles[:old_count]

        occupied -= 1
        zero_count = int(np.count_nonzero(occupied == 0))
        surviving = old_count - zero_count
        new_pile = old_count

        # Survivors go to the right end, leaving the last slot for the new pile.
        back = capacity - surviving - 1
        self._piles[back : capacity - 1] = occupied[occupied != 0]
        self._piles[capacity - 1] = new_pile

        self._piles[: surviving + 1] = self._piles[back:]
        self._piles[surviving + 1 :] = 0
        self.pile_count = surviving + 1

        assert self.is_valid(), f"Invalid board after round: {self.piles()}"

    def __repr__(self) -> str:
        return f"SolitaireBoard([{self.config_string()}], final_pile_count={self.final_pile_count})"


# Convenience alias
Board = SolitaireBoard
