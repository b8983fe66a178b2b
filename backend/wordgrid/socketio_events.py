from flask_socketio import join_room, leave_room, emit
from wordgrid import socketio, get_store
from wordgrid.errors import NotFound


def _room_for(data):
    game_id = (data or {}).get('game_id')
    if game_id is None:
        emit('error', {'message': 'game_id is required'})
        return None
    try:
        game = get_store().get_game(game_id)
    except NotFound as exc:
        emit('error', exc.to_dict())
        return None
    return f"game:{game.game_id}"


def handle_connect():
    emit('connected', {'message': 'Connected to /ws'})


def handle_join_game(data):
    room = _room_for(data)
    if room is None:
        return
    join_room(room)
    emit('joined', {'room': room})


def handle_leave_game(data):
    room = _room_for(data)
    if room is None:
        return
    leave_room(room)
    emit('left', {'room': room})


def handle_ping(data):
    emit('pong', data or {})


def register_socketio_handlers(testing: bool = False) -> None:
    """Register Socket.IO event handlers.

    Always register on namespace '/ws'. When testing is True, also mirror
    handlers on the default namespace '/' to accommodate the test harness.
    """
    namespaces = ['/ws', '/'] if testing else ['/ws']
    for ns in namespaces:
        socketio.on_event('connect', handle_connect, namespace=ns)
        socketio.on_event('join_game', handle_join_game, namespace=ns)
        socketio.on_event('leave_game', handle_leave_game, namespace=ns)
        socketio.on_event('ping', handle_ping, namespace=ns)
