from typing import Sequence

from wordgrid.schemas import MIN_MOVE_LENGTH


def move_points(tiles: Sequence[int]) -> int:
    """Points for an accepted path.

    3 tiles score 1 and every further tile doubles it: 3, 4, 5, 6 -> 1, 2, 4, 8.
    """
    return 2 ** (len(tiles) - MIN_MOVE_LENGTH)
