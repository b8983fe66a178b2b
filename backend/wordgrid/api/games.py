from flask import Blueprint, jsonify, request, current_app
from wordgrid import get_store, socketio
from wordgrid.errors import (
    GameError,
    InvalidBoard,
    InvalidDictionary,
    NotFound,
    DictionaryMissing,
    MalformedMove,
    DisallowedMove,
    DuplicateMove,
)


games = Blueprint('games', __name__)

STATUS_BY_ERROR = {
    InvalidBoard: 400,
    InvalidDictionary: 400,
    MalformedMove: 400,
    NotFound: 404,
    DictionaryMissing: 403,
    DisallowedMove: 403,
    DuplicateMove: 403,
}


def _notify(game_id: int) -> None:
    socketio.emit('state_update', {'gameId': game_id}, to=f"game:{game_id}", namespace='/ws')


@games.errorhandler(GameError)
def handle_game_error(exc):
    status = STATUS_BY_ERROR.get(type(exc), 400)
    current_app.logger.debug(f"[reject] {request.method} {request.path} -> {status} {exc.kind}")
    return jsonify(exc.to_dict()), status


@games.route('', methods=['POST'])
def create_game():
    game = get_store().create_game(request.get_json(silent=True))
    return jsonify({'gameId': game.game_id}), 201


@games.route('/<int:game_id>', methods=['GET'])
def get_game_state(game_id):
    game = get_store().get_game(game_id)
    with game.lock:
        payload = game.to_dict()
    return jsonify(payload)


@games.route('/<int:game_id>/dict', methods=['PUT'])
def set_game_dict(game_id):
    game = get_store().attach_dictionary(game_id, request.get_json(silent=True))
    _notify(game.game_id)
    return '', 204


@games.route('/<int:game_id>/moves', methods=['POST'])
def make_move(game_id):
    move = get_store().submit_move(game_id, request.get_json(silent=True))
    _notify(game_id)
    return jsonify({'moveId': move.move_id, 'points': move.points}), 201
