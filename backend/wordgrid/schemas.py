"""Request payload parsing.

Raw JSON bodies are parsed into typed inputs here; any shape mismatch is
raised as the engine error for that payload kind.
"""
from __future__ import annotations

from typing import Annotated, Any, List

from pydantic import (
    BaseModel,
    BeforeValidator,
    Field,
    RootModel,
    StrictStr,
    StringConstraints,
    ValidationError,
)

from wordgrid.errors import InvalidBoard, InvalidDictionary, MalformedMove
from wordgrid.models import BOARD_TILES

MIN_MOVE_LENGTH = 3

Letter = Annotated[StrictStr, StringConstraints(min_length=1, max_length=1)]


def _tile_number(value: Any) -> int:
    # JSON numbers only; 6.0 is the same tile as 6
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError('tile must be a number')
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError('tile must be an integer')
        return int(value)
    return value


TileIndex = Annotated[int, Field(ge=1, le=BOARD_TILES), BeforeValidator(_tile_number)]


class BoardInput(BaseModel):
    board: List[Letter] = Field(min_length=BOARD_TILES, max_length=BOARD_TILES)


class DictionaryInput(BaseModel):
    words: List[StrictStr]


class MoveInput(RootModel[List[TileIndex]]):
    root: List[TileIndex] = Field(min_length=MIN_MOVE_LENGTH)


def parse_board(payload: Any) -> BoardInput:
    try:
        return BoardInput.model_validate(payload)
    except ValidationError as exc:
        raise InvalidBoard() from exc


def parse_dictionary(payload: Any) -> DictionaryInput:
    try:
        return DictionaryInput.model_validate(payload)
    except ValidationError as exc:
        raise InvalidDictionary() from exc


def parse_move(payload: Any) -> MoveInput:
    try:
        return MoveInput.model_validate(payload)
    except ValidationError as exc:
        raise MalformedMove() from exc
