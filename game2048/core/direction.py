"""Move directions and their conversion from user tokens and action indices."""

from enum import Enum
from numbers import Integral

from game2048.core.errors import InvalidDirection


class Direction(str, Enum):
    """
    The four directions a grid can be slid in.

    The declaration order defines the action index (0: left, 1: up, 2: right, 3: down). The index is
    also the number of counter-clockwise quarter turns that brings the direction onto ``LEFT``.
    """

    LEFT = 'left'
    UP = 'up'
    RIGHT = 'right'
    DOWN = 'down'

    @property
    def action(self) -> int:
        """Integer action index of the direction."""
        return _ACTIONS.index(self)

    @classmethod
    def from_action(cls, action: int) -> 'Direction':
        """
        Get the direction for an action index.

        Parameters
        ----------
        action : int
            Action index between 0 and 3. Numpy integers are accepted.

        Returns
        -------
        Direction
            The matching direction.

        Raises
        ------
        InvalidDirection
            If the index is out of range or not an integer.
        """
        if isinstance(action, bool) or not isinstance(action, Integral) or not 0 <= action < len(_ACTIONS):
            raise InvalidDirection(f'Unknown action index: {action!r}')
        return _ACTIONS[int(action)]

    @classmethod
    def parse(cls, token: 'Direction | str | int') -> 'Direction':
        """
        Convert a direction token into a ``Direction``.

        Parameters
        ----------
        token : Direction | str | int
            A direction, a case-insensitive direction name ("Left", "UP", "down") or an action index.

        Returns
        -------
        Direction
            The parsed direction.

        Raises
        ------
        InvalidDirection
            If the token is not a recognized direction.
        """
        if isinstance(token, cls):
            return token
        if isinstance(token, str):
            try:
                return cls(token.strip().lower())
            except ValueError as error:
                raise InvalidDirection(f'Unknown direction: {token!r}') from error
        if isinstance(token, Integral):
            return cls.from_action(token)
        raise InvalidDirection(f'Unknown direction: {token!r}')


_ACTIONS = tuple(Direction)
