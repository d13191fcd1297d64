# -*- coding: utf-8 -*-
"""
Evaluate a random policy on the 2048 game.
"""
import logging
from collections import Counter

from numpy.random import default_rng
from tqdm import trange

from game2048 import GameConfig, GameSession, legal_directions


def evaluate(length: int = 10, size: int = 4, win_threshold: int = 2048, seed: int | None = None) -> dict[int, int]:
    """
    Play games with a policy choosing uniformly among the legal directions.

    Parameters
    ----------
    length : int, optional
        The number of games to play (default is 10).
    size : int, optional
        The size of the square grid (default is 4).
    win_threshold : int, optional
        Tile value that ends a game as won (default is 2048).
    seed : int, optional
        Seed of the policy and of the tile spawner.

    Returns
    -------
    dict[int, int]
        Number of games per maximum tile reached.
    """
    generator = default_rng(seed)
    session = GameSession(GameConfig(size=size, win_threshold=win_threshold, seed=seed, history_limit=0))
    score = []

    with trange(length) as period:
        for num in period:
            session.reset()

            # ##: Play a game.
            while not session.is_finished:
                directions = legal_directions(session.grid)
                session.move(directions[generator.integers(len(directions))])

                # ##: Log.
                period.set_description(f"Evaluation: {num + 1}")
                period.set_postfix(score=session.score, max=int(session.grid.max()))

            # ##: Save max cells.
            score.append(int(session.grid.max()))

    # ##: Final log.
    frequency = Counter(score)
    return dict(sorted(frequency.items()))


if __name__ == "__main__":
    from argparse import ArgumentParser

    parser = ArgumentParser()
    parser.add_argument("--length", type=int, default=10)
    parser.add_argument("--size", type=int, default=4)
    parser.add_argument("--win", type=int, default=2048)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    result = evaluate(length=args.length, size=args.size, win_threshold=args.win, seed=args.seed)
    print(f"Random policy, max tiles: {result}")
