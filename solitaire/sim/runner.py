from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional

import numpy as np

from solitaire.game.board import NUM_FINAL_PILES, SolitaireBoard


RoundCallback = Callable[[int, SolitaireBoard], None]


def rounds_bound(final_pile_count: int) -> int:
    """Upper bound on rounds to reach the final configuration (k*k - k)."""
    return final_pile_count * final_pile_count - final_pile_count


@dataclass
class RunConfig:
    games: int = 100
    final_piles: int = NUM_FINAL_PILES
    seed: Optional[int] = None
    max_rounds: Optional[int] = None  # defaults to rounds_bound(final_piles)


@dataclass
class GameRecord:
    initial: List[int]
    history: List[List[int]] = field(default_factory=list)  # configuration after each round

    @property
    def rounds(self) -> int:
        return len(self.history)

    @property
    def final(self) -> List[int]:
        return self.history[-1] if self.history else self.initial


@dataclass
class RunStats:
    games: int
    min_rounds: int
    max_rounds: int
    mean_rounds: float
    rounds: np.ndarray


def play_game(
    board: SolitaireBoard,
    on_round: Optional[RoundCallback] = None,
    max_rounds: Optional[int] = None,
) -> GameRecord:
    """Play rounds until the board is done; return the configuration history.

    on_round is called with the 1-based round number after every round.
    Raises RuntimeError if the board is not done after max_rounds rounds.
    """
    record = GameRecord(initial=board.piles())
    round_number = 1
    while not board.is_done():
        if max_rounds is not None and round_number > max_rounds:
            raise RuntimeError(f"Game did not finish within {max_rounds} rounds")
        board.play_round()
        record.history.append(board.piles())
        if on_round is not None:
            on_round(round_number, board)
        round_number += 1
    return record


def run_many(cfg: RunConfig) -> RunStats:
    """Play cfg.games random games and summarise rounds to termination."""
    rng = np.random.default_rng(cfg.seed)
    limit = cfg.max_rounds if cfg.max_rounds is not None else rounds_bound(cfg.final_piles)
    rounds = np.zeros(cfg.games, dtype=np.int64)
    for i in range(cfg.games):
        board = SolitaireBoard.random(rng, final_pile_count=cfg.final_piles)
        rounds[i] = play_game(board, max_rounds=limit).rounds

    if cfg.games == 0:
        return RunStats(games=0, min_rounds=0, max_rounds=0, mean_rounds=0.0, rounds=rounds)
    return RunStats(
        games=cfg.games,
        min_rounds=int(rounds.min()),
        max_rounds=int(rounds.max()),
        mean_rounds=float(rounds.mean()),
        rounds=rounds,
    )
