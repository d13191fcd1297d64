"""
Configuration for a 2048 game session.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """
    Configuration for a game session.

    Attributes are validated at construction; invalid values raise ``ValueError``.
    """

    # ##>: Board parameters.
    size: int = 4  # Rows and columns of the square grid
    start_tiles: int = 2  # Tiles spawned by a reset

    # ##>: End of game.
    win_threshold: int = 128  # Smallest tile that wins the game

    # ##>: Undo history.
    history_limit: int = 100  # Max snapshots kept, oldest dropped first

    # ##>: Random tile placement (None: fresh entropy).
    seed: int | None = None

    def __post_init__(self):
        """Validate the configuration."""
        if self.size <= 0:
            raise ValueError(f'size must be > 0, got {self.size}')
        if not 0 <= self.start_tiles <= self.size * self.size:
            raise ValueError(f'start_tiles must be between 0 and {self.size * self.size}, got {self.start_tiles}')
        if self.win_threshold <= 0:
            raise ValueError(f'win_threshold must be > 0, got {self.win_threshold}')
        if self.history_limit < 0:
            raise ValueError(f'history_limit must be >= 0, got {self.history_limit}')


def default_config() -> GameConfig:
    """
    Create the default configuration: a 4x4 grid won at 128.

    Returns
    -------
    GameConfig
        Default configuration.
    """
    return GameConfig()


def classic_config() -> GameConfig:
    """
    Create the configuration of the classic game, won at 2048.

    Returns
    -------
    GameConfig
        Classic configuration.
    """
    return GameConfig(win_threshold=2048)
