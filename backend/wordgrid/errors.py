"""Error kinds raised by the game engine.

Every error is terminal for the operation that raised it; the caller fixes
its input and resubmits. Transport layers map ``kind`` to a status code.
"""


class GameError(Exception):
    kind = 'GameError'
    message = 'Game error'

    def __init__(self, message=None):
        super().__init__(message or self.message)
        self.message = message or self.message

    def to_dict(self):
        return {'error': self.message, 'kind': self.kind}


class InvalidBoard(GameError):
    kind = 'InvalidBoard'
    message = 'Invalid board'


class InvalidDictionary(GameError):
    kind = 'InvalidDictionary'
    message = 'Invalid dictionary'


class NotFound(GameError):
    kind = 'NotFound'
    message = 'Game was not found'


class DictionaryMissing(GameError):
    kind = 'DictionaryMissing'
    message = 'Game is missing dictionary'


class MalformedMove(GameError):
    kind = 'MalformedMove'
    message = 'Move must be list of 3+ tiles'


class DisallowedMove(GameError):
    kind = 'DisallowedMove'
    message = 'Move is not allowed on board'


class DuplicateMove(GameError):
    kind = 'DuplicateMove'
    message = 'Move already played'
