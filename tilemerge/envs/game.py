# -*- coding: utf-8 -*-
"""
Game state and the transitions applied to it.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from numpy.random import Generator

from tilemerge.addons.config import GameConfiguration
from tilemerge.core.board import Board, Direction
from tilemerge.core.errors import NoEmptyCell, UnsupportedEvent
from tilemerge.core.gamemove import is_done

logger = logging.getLogger(__name__)


class GameEvent(Enum):
    """Commands sent by the input layer."""

    SWIPE_UP = "up"
    SWIPE_DOWN = "down"
    SWIPE_LEFT = "left"
    SWIPE_RIGHT = "right"
    UNDO = "undo"
    SAVE_GAME = "save"
    LOAD_GAME = "load"
    NEW_GAME = "new"


SWIPES = {
    GameEvent.SWIPE_UP: Direction.UP,
    GameEvent.SWIPE_DOWN: Direction.DOWN,
    GameEvent.SWIPE_LEFT: Direction.LEFT,
    GameEvent.SWIPE_RIGHT: Direction.RIGHT,
}


@dataclass(frozen=True)
class Game:
    """
    Immutable state of a game.

    The board held by a game is never mutated: every transition works on a copy and returns a new game.
    """

    board: Board
    is_game_over: bool = False
    game_over_reason: Optional[str] = None

    def handle_event(self, event: GameEvent, rng: Optional[Generator] = None) -> Game:
        """Apply an event to this game, see ``apply``."""
        return apply(self, event, rng=rng)


def new_game(config: Optional[GameConfiguration] = None, rng: Optional[Generator] = None) -> Game:
    """
    Start a new game.

    Parameters
    ----------
    config : GameConfiguration, optional
        Size of the board, number of starting tiles and spawn weights.
    rng : Generator, optional
        Random generator used by the board.

    Returns
    -------
    Game
        A game with an empty board on which the starting tiles have been placed.
    """
    config = config or GameConfiguration()
    board = Board(config.size, rng=rng, spawn_weights=config.spawn_weights)
    for _ in range(config.start_tiles):
        board.add_random_tile()
    return Game(board=board)


def _swipe(game: Game, direction: Direction, rng: Optional[Generator]) -> Game:
    if game.is_game_over:
        logger.debug("Ignoring %s, the game is over", direction.name)
        return game

    board = game.board.copy()
    board.merge(direction)

    # ##: A move that changes nothing does not spawn a tile.
    if board == game.board:
        logger.debug("Move %s left the board unchanged", direction.name)
        return game

    try:
        board.add_random_tile(rng)
    except NoEmptyCell:
        logger.debug("Board full after %s", direction.name)
        return Game(board=board, is_game_over=True, game_over_reason="board full")

    if is_done(board.to_array()):
        logger.debug("No legal move left after %s", direction.name)
        return Game(board=board, is_game_over=True, game_over_reason="no legal moves")
    return replace(game, board=board)


def apply(game: Game, event: GameEvent, rng: Optional[Generator] = None) -> Game:
    """
    Compute the game that follows an event.

    Parameters
    ----------
    game : Game
        The current game, left untouched.
    event : GameEvent
        The event to apply.
    rng : Generator, optional
        Random generator used to insert the new tile, instead of the board's own.

    Returns
    -------
    Game
        The new game. The same game is returned when a swipe does not change the board.

    Raises
    ------
    UnsupportedEvent
        For undo, save and load.
    """
    if event in SWIPES:
        return _swipe(game, SWIPES[event], rng)
    if event is GameEvent.NEW_GAME:
        return new_game(GameConfiguration(size=game.board.size), rng=rng)
    raise UnsupportedEvent(f"Event {event.name} is not supported")
