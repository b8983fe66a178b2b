from __future__ import annotations

import logging
import threading
from typing import Any, List

from wordgrid.errors import DictionaryMissing, GameError, NotFound
from wordgrid.models import Board, Dictionary, Game, Move
from wordgrid.schemas import parse_board, parse_dictionary, parse_move
from .moves import adjacency_rule, check_allowed, check_not_played
from .scoring import move_points

log = logging.getLogger(__name__)


class GameStore:
    """In-process registry of games and the three operations that mutate them.

    Game ids are list positions, assigned under the registry lock. Dictionary
    attach and move submission for one game run under that game's own lock,
    so the duplicate-word check and the append happen together.
    """

    def __init__(self, adjacency_mode: str = 'offset'):
        self.adjacency_mode = adjacency_mode
        self._are_neighbours = adjacency_rule(adjacency_mode)
        self._games: List[Game] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._games)

    def get_game(self, game_id: Any) -> Game:
        try:
            idx = int(game_id)
        except (TypeError, ValueError):
            raise NotFound() from None
        with self._lock:
            if not 0 <= idx < len(self._games):
                raise NotFound()
            return self._games[idx]

    def create_game(self, payload: Any) -> Game:
        board = Board.from_letters(parse_board(payload).board)
        with self._lock:
            game = Game(game_id=len(self._games), board=board)
            self._games.append(game)
        log.info(f"[create] game={game.game_id} board={''.join(board.tiles)}")
        return game

    def attach_dictionary(self, game_id: Any, payload: Any) -> Game:
        game = self.get_game(game_id)
        dictionary = Dictionary.from_words(parse_dictionary(payload).words)
        with game.lock:
            game.dictionary = dictionary
        log.info(f"[dict] game={game.game_id} words={len(dictionary)}")
        return game

    def submit_move(self, game_id: Any, payload: Any) -> Move:
        game = self.get_game(game_id)
        with game.lock:
            try:
                if game.dictionary is None:
                    raise DictionaryMissing()
                tiles = tuple(parse_move(payload).root)
                word = check_allowed(game, tiles, self._are_neighbours)
                check_not_played(game, word)
            except GameError as exc:
                log.debug(f"[move-rejected] game={game.game_id} kind={exc.kind} tiles={payload!r}")
                raise
            move = Move(move_id=len(game.moves), tiles=tiles, word=word, points=move_points(tiles))
            game.moves.append(move)
        log.info(f"[move] game={game.game_id} move={move.move_id} word={move.word} points={move.points}")
        return move

    def reset(self) -> None:
        with self._lock:
            self._games = []
        log.info("[reset] all games dropped")
