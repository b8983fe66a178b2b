"""Game domain services: move rules, scoring and the game store.

This package contains the pure game engine that is called by HTTP routes
and socket handlers, keeping transport concerns separated from the rules
of the board.
"""
from .store import GameStore

__all__ = ['GameStore']
