from __future__ import annotations

from typing import Callable, Dict, Sequence, Tuple

from wordgrid.errors import DisallowedMove, DuplicateMove
from wordgrid.models import BOARD_WIDTH, Game

# for reference:
# [[ 1, 2, 3, 4],
#  [ 5, 6, 7, 8],
#  [ 9,10,11,12],
#  [13,14,15,16]]
NEIGHBOUR_OFFSETS = frozenset({-5, -4, -3, -1, 1, 3, 4, 5})

Coord = Tuple[int, int]


def tile_coord(tile: int) -> Coord:
    """1-based (row, column) of a 1-based tile index."""
    return (tile - 1) // BOARD_WIDTH + 1, (tile - 1) % BOARD_WIDTH + 1


def offset_neighbours(a: int, b: int) -> bool:
    # Index arithmetic only: 4 -> 5 counts as a neighbour even though it wraps a row.
    return (b - a) in NEIGHBOUR_OFFSETS


def grid_neighbours(a: int, b: int) -> bool:
    (r1, c1), (r2, c2) = tile_coord(a), tile_coord(b)
    return a != b and abs(r1 - r2) <= 1 and abs(c1 - c2) <= 1


ADJACENCY_RULES: Dict[str, Callable[[int, int], bool]] = {
    'offset': offset_neighbours,
    'grid': grid_neighbours,
}


def adjacency_rule(mode: str) -> Callable[[int, int], bool]:
    try:
        return ADJACENCY_RULES[mode]
    except KeyError:
        raise ValueError(f"Unknown adjacency mode {mode!r}; expected one of {sorted(ADJACENCY_RULES)}") from None


def path_is_connected(tiles: Sequence[int], are_neighbours: Callable[[int, int], bool] = offset_neighbours) -> bool:
    return all(are_neighbours(prev, cur) for prev, cur in zip(tiles, tiles[1:]))


def path_is_unique(tiles: Sequence[int]) -> bool:
    # Tiles can be reused by later moves, just not twice within one path.
    return len(set(tiles)) == len(tiles)


def check_allowed(game: Game, tiles: Sequence[int], are_neighbours: Callable[[int, int], bool] = offset_neighbours) -> str:
    """Validate ``tiles`` against the board and dictionary and return the word it spells.

    Assumes the game has a dictionary and ``tiles`` is already well formed.
    """
    if not path_is_connected(tiles, are_neighbours) or not path_is_unique(tiles):
        raise DisallowedMove()
    word = game.board.word_for(tiles)
    if word not in game.dictionary:
        raise DisallowedMove()
    return word


def check_not_played(game: Game, word: str) -> None:
    # Word level: a different path spelling the same word is still a repeat.
    if word in game.played_words():
        raise DuplicateMove()
