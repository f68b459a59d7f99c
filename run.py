#!/usr/bin/env python3
"""
Holdem - Command line helpers

Usage:
    python run.py evaluate As Ks Qs Js Ts [more cards...]
    python run.py deal [--seed SEED] [--players N] [--verbose]
"""

import argparse
import logging
import sys

from holdem.config import TableConfig
from holdem.core.card import format_cards, parse_cards
from holdem.core.deck import burn, deal
from holdem.core.hand import find_best_hand
from holdem.core.rng import SecureRandom, SeededRandom
from holdem.core.table import start_hand


logger = logging.getLogger("holdem")


def cmd_evaluate(args: argparse.Namespace) -> int:
    cards = parse_cards(" ".join(args.cards))
    evaluation = find_best_hand(cards)
    print(f"{evaluation.description}: {format_cards(evaluation.cards)} (value {evaluation.value})")
    return 0


def cmd_deal(args: argparse.Namespace) -> int:
    rng = SeededRandom(args.seed) if args.seed is not None else SecureRandom()
    config = TableConfig()
    player_ids = [f"p{i + 1}" for i in range(args.players)]
    state, deck = start_hand(config.create_table(player_ids), rng)

    for player in state.players:
        print(f"{player.id}: {player.hand}")

    board = []
    for count in (3, 1, 1):
        deck = burn(deck)
        deck, cards = deal(deck, count)
        board.extend(cards)
    print(f"Board: {format_cards(board)}")

    for player in state.players:
        evaluation = find_best_hand(list(player.hand.cards) + board)
        print(f"{player.id}: {evaluation.description}")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Holdem rules engine")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    evaluate = subparsers.add_parser("evaluate", help="Rank the best 5 of the given cards")
    evaluate.add_argument("cards", nargs="+", help="Cards like As Kd Th")
    evaluate.set_defaults(func=cmd_evaluate)

    deal_cmd = subparsers.add_parser("deal", help="Deal one hand and show the result")
    deal_cmd.add_argument("--seed", type=int, default=None, help="Seed for a replayable deal")
    deal_cmd.add_argument("--players", type=int, default=2, help="Number of players (2-9)")
    deal_cmd.set_defaults(func=cmd_deal)

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        return args.func(args)
    except ValueError as exc:
        logger.error(str(exc))
        return 1


if __name__ == "__main__":
    sys.exit(main())
