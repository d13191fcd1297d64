# -*- coding: utf-8 -*-
"""
Play 2048 in the terminal.
"""
import logging

from game2048 import Direction, GameConfig, GameSession, GameStatus

# ##: Keys mapped to directions, on top of the direction names.
KEYS = {
    "w": Direction.UP,
    "a": Direction.LEFT,
    "s": Direction.DOWN,
    "d": Direction.RIGHT,
    "k": Direction.UP,
    "h": Direction.LEFT,
    "j": Direction.DOWN,
    "l": Direction.RIGHT,
}

QUIT, RESTART, UNDO = "q", "r", "u"


def redraw(session: GameSession):
    """
    Redraw the game board.

    Parameters
    ----------
    session: GameSession
        The game to draw
    """
    session.render()
    if session.is_finished:
        print("You win!" if session.status is GameStatus.WON else "Game over!")


def reset(session: GameSession):
    """
    Reset and redraw the game board.

    Parameters
    ----------
    session: GameSession
        The game to reset
    """
    session.reset()
    redraw(session)


def step(session: GameSession, direction: Direction):
    """
    Applied a move to the game.

    Parameters
    ----------
    session: GameSession
        The game to play

    direction: Direction
        Direction to slide
    """
    outcome = session.move(direction)
    if outcome is None:
        print(f"game is {session.status.value}, press {RESTART} to restart")
        return
    if not outcome.moved:
        print("nothing moved")
        return

    print(f"reward={outcome.score_delta}")
    redraw(session)


def key_handler(session: GameSession, key: str) -> bool:
    """
    Handle a key.

    Parameters
    ----------
    session: GameSession
        The game to play

    key: str
        Key typed by the player

    Returns
    -------
    bool
        False when the player quits
    """
    key = key.strip().lower()

    if key == QUIT:
        return False

    if key == RESTART:
        reset(session)
        return True

    if key == UNDO:
        if session.undo():
            redraw(session)
        else:
            print("nothing to undo")
        return True

    if key in KEYS:
        step(session, KEYS[key])
    elif key in {direction.value for direction in Direction}:
        step(session, Direction(key))
    else:
        print(f"unknown key {key!r}, use w/a/s/d, {UNDO} to undo, {RESTART} to restart, {QUIT} to quit")
    return True


if __name__ == "__main__":
    from argparse import ArgumentParser

    parser = ArgumentParser(description="Play 2048 in the terminal.")
    parser.add_argument("--size", type=int, default=4)
    parser.add_argument("--win", type=int, default=2048)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    game = GameSession(GameConfig(size=args.size, win_threshold=args.win, seed=args.seed))
    redraw(game)

    # Blocking input loop
    try:
        while key_handler(game, input("> ")):
            pass
    except (EOFError, KeyboardInterrupt):
        print()
