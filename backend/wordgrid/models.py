from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Optional, Tuple

BOARD_WIDTH = 4
BOARD_HEIGHT = 4
BOARD_TILES = BOARD_WIDTH * BOARD_HEIGHT


@dataclass(frozen=True)
class Board:
    """The 16-letter grid for one game, tiles numbered 1..16 in row-major order."""
    tiles: Tuple[str, ...]

    @classmethod
    def from_letters(cls, letters: Iterable[str]) -> 'Board':
        return cls(tiles=tuple(ch.upper() for ch in letters))

    def letter_at(self, tile: int) -> str:
        return self.tiles[tile - 1]

    def word_for(self, path: Iterable[int]) -> str:
        """Concatenates the letters under ``path`` in order."""
        return ''.join(self.letter_at(t) for t in path).upper()

    def to_list(self) -> List[str]:
        return list(self.tiles)


@dataclass(frozen=True)
class Dictionary:
    words: FrozenSet[str]

    @classmethod
    def from_words(cls, words: Iterable[str]) -> 'Dictionary':
        return cls(words=frozenset(w.upper() for w in words))

    def __contains__(self, word: str) -> bool:
        return word.upper() in self.words

    def __len__(self) -> int:
        return len(self.words)


@dataclass(frozen=True)
class Move:
    move_id: int
    tiles: Tuple[int, ...]
    word: str
    points: int

    def to_dict(self):
        return {
            'moveId': self.move_id,
            'tiles': list(self.tiles),
            'word': self.word,
            'points': self.points,
        }


@dataclass
class Game:
    game_id: int
    board: Board
    dictionary: Optional[Dictionary] = None
    moves: List[Move] = field(default_factory=list)
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False, compare=False)

    @property
    def status(self) -> str:
        # created -> ready once a dictionary is attached; there is no closed state
        return 'ready' if self.dictionary is not None else 'created'

    @property
    def score(self) -> int:
        return sum(m.points for m in self.moves)

    def played_words(self) -> FrozenSet[str]:
        return frozenset(m.word for m in self.moves)

    def to_dict(self):
        return {
            'gameId': self.game_id,
            'board': self.board.to_list(),
            'status': self.status,
            'hasDictionary': self.dictionary is not None,
            'dictionarySize': len(self.dictionary) if self.dictionary is not None else 0,
            'moves': [m.to_dict() for m in self.moves],
            'score': self.score,
        }
