"""
Console driver for Bulgarian Solitaire.

Modes, picked by command-line flags:
  (none)   random initial configuration, every round printed in one go
  -s       random initial configuration, wait for return before each round
  -u       user-entered initial configuration, every round printed in one go
  -u -s    user-entered initial configuration, single step
  --games N play N random games and print rounds-to-finish statistics
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

import numpy as np

from solitaire.game.board import NUM_FINAL_PILES, SolitaireBoard, card_total_for
from solitaire.game.encoding import ConfigError, parse_config
from solitaire.sim.runner import RunConfig, play_game, rounds_bound, run_many


LOG_FORMAT = "%(message)s"
CONTINUE_PROMPT = "<Type return to continue>"
ENTRY_PROMPT = "Please enter a space-separated list of positive integers followed by newline:"

ReadLine = Callable[[str], str]


@dataclass
class SimulatorConfig:
    user_config: bool = False
    single_step: bool = False
    final_piles: int = NUM_FINAL_PILES
    seed: Optional[int] = None


def read_user_config(read_line: ReadLine, total_cards: int) -> List[int]:
    """Prompt until the user enters positive integers summing to total_cards."""
    print(f"Number of total cards is {total_cards}")
    print("You will be entering the initial configuration of the cards (i.e., how many in each pile).")
    print(ENTRY_PROMPT)
    while True:
        try:
            return parse_config(read_line(""), total_cards)
        except ConfigError as exc:
            print(exc)
            print(ENTRY_PROMPT)


def make_board(cfg: SimulatorConfig, read_line: ReadLine) -> SolitaireBoard:
    if cfg.user_config:
        piles = read_user_config(read_line, card_total_for(cfg.final_piles))
        return SolitaireBoard.from_config(piles, cfg.final_piles)
    return SolitaireBoard.random(np.random.default_rng(cfg.seed), cfg.final_piles)


def run(cfg: SimulatorConfig, read_line: Optional[ReadLine] = None) -> SolitaireBoard:
    """Play one game to the end, printing each round; return the final board."""
    if read_line is None:
        read_line = input
    board = make_board(cfg, read_line)

    def show_round(round_number: int, b: SolitaireBoard) -> None:
        print(f"[{round_number}] Current configuration: {b.config_string()}")
        if cfg.single_step and not b.is_done():
            read_line(CONTINUE_PROMPT)

    play_game(board, on_round=show_round)
    print("Done!")
    return board


def run_batch(cfg: RunConfig) -> None:
    """Play cfg.games random games and print how many rounds they took."""
    stats = run_many(cfg)
    print(f"Games: {stats.games}")
    print(
        f"Rounds to finish: min {stats.min_rounds}, max {stats.max_rounds}, "
        f"mean {stats.mean_rounds:.2f} (bound {rounds_bound(cfg.final_piles)})"
    )


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Bulgarian Solitaire simulator")
    parser.add_argument("-u", dest="user_config", action="store_true", help="Enter the initial configuration")
    parser.add_argument("-s", dest="single_step", action="store_true", help="Pause for return after each round")
    parser.add_argument("--piles", type=int, default=NUM_FINAL_PILES, help="Number of piles in the final configuration")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for the random configuration")
    parser.add_argument("--games", type=int, default=None, help="Play this many random games and print statistics")
    parser.add_argument("--quiet", action="store_true", help="Do not log the initial configuration")
    args = parser.parse_args(argv)
    if args.piles < 1:
        parser.error("--piles must be at least 1")
    if args.games is not None:
        if args.games < 1:
            parser.error("--games must be at least 1")
        if args.user_config or args.single_step:
            parser.error("--games cannot be combined with -u or -s")
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.WARNING if args.quiet or args.games is not None else logging.INFO,
        format=LOG_FORMAT,
        stream=sys.stdout,
    )
    if args.games is not None:
        run_batch(RunConfig(games=args.games, final_piles=args.piles, seed=args.seed))
        return 0

    cfg = SimulatorConfig(
        user_config=args.user_config,
        single_step=args.single_step,
        final_piles=args.piles,
        seed=args.seed,
    )
    try:
        run(cfg)
    except EOFError:
        print("\nInput ended before the game finished.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
